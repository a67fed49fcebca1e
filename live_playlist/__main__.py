"""Allows `python -m live_playlist`."""
import sys

from live_playlist.main import main

sys.exit(main())
