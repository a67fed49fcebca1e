"""
Live match and stream lookups.

Both lookups are best-effort: any failure is logged and returned as a
failed FetchResult instead of being raised, so one bad response never
aborts a playlist run.
"""
import logging
from typing import Optional, Sequence

from config.settings import settings
from live_playlist.api_client import ApiClient
from live_playlist.results import FetchResult
from live_playlist.schemas import (
    Match,
    PlayUrl,
    parse_fixture_response,
    parse_meta_response,
)

logger = logging.getLogger("provider")


class MatchProvider:
    """Resolves live matches and their HD streams through an ApiClient."""

    def __init__(self, client: ApiClient, hd_markers: Optional[Sequence[str]] = None):
        """
        Args:
            client: API client for the match endpoints
            hd_markers: Labels a stream name must contain (defaults to settings.hd_markers)
        """
        self._client = client
        self._hd_markers = tuple(settings.hd_markers if hd_markers is None else hd_markers)

    def get_live_matches(self, date: str) -> FetchResult[Match]:
        """
        Get matches that are live on the given date.

        Args:
            date: Date in YYYYMMDD form

        Returns:
            FetchResult of live matches in upstream order; a failed result
            (with no items) if the fixture lookup could not be completed
        """
        try:
            payload = self._client.fetch_data(self._client.fixture_url(date))
            live = parse_fixture_response(payload)
        except Exception as e:
            logger.error(f"Error fetching live match data for date {date}: {e!r}")
            return FetchResult.failure(e)

        logger.info(f"{len(live)} live matches on {date}")
        return FetchResult.success(live)

    def get_filtered_play_urls(self, match_id: str) -> FetchResult[PlayUrl]:
        """
        Get the HD/FullHD stream URLs for a match.

        Returns:
            FetchResult of matching PlayUrls in upstream order; a failed
            result means the match could not be resolved and should be skipped
        """
        try:
            payload = self._client.fetch_data(self._client.meta_url(match_id))
            meta = parse_meta_response(payload, match_id)
        except Exception as e:
            logger.error(f"Error fetching meta data for match ID {match_id}: {e!r}")
            return FetchResult.failure(e)

        hd_urls = [u for u in meta.play_urls if u.is_high_definition(self._hd_markers)]
        logger.debug(
            f"Match {match_id}: kept {len(hd_urls)} of {len(meta.play_urls)} stream URLs"
        )
        return FetchResult.success(hd_urls)
