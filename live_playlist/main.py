"""
Live Match Playlist - entry point

Fetches today's live matches (at a fixed UTC offset), resolves their HD
streams and writes an M3U playlist. Always exits 0; failures are logged.
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from config.settings import Settings, settings as default_settings
from live_playlist.api_client import ApiClient
from live_playlist.playlist import PlaylistGenerator
from live_playlist.provider import MatchProvider
from live_playlist.utils.helpers import date_at_offset

logger = logging.getLogger("main")


def run(
    settings: Settings = default_settings,
    client: Optional[ApiClient] = None,
    now: Optional[datetime] = None,
) -> Path:
    """
    Run the pipeline once: fetch live matches, resolve streams, write playlist.

    Args:
        settings: Configuration to use
        client: API client to use (built from settings if omitted)
        now: Reference instant for "today" (defaults to the current time)

    Returns:
        Path of the playlist file
    """
    if client is None:
        client = ApiClient(settings.api_base_url, timeout=settings.request_timeout)

    date = date_at_offset(settings.utc_offset_hours, now)
    path = settings.playlist_path

    with client:
        provider = MatchProvider(client, hd_markers=settings.hd_markers)
        live_matches = provider.get_live_matches(date)

        generator = PlaylistGenerator(
            provider, include_commentators=settings.include_commentators
        )
        generator.generate(live_matches, path)

    return path


def main() -> int:
    logging.basicConfig(
        level=default_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run()
    except Exception:
        logger.exception("An unexpected error occurred")

    return 0


if __name__ == "__main__":
    sys.exit(main())
