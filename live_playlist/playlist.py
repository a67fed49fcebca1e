"""
M3U playlist generation for live matches.

Each entry is a two-line block:

    #EXTINF:-1 tvg-id="<id>" tvg-name="<name> - <quality>" tvg-logo="<logo>" group-title="<tournament>",<name> - <quality> - <commentators>
    <stream url>
"""
import logging
from pathlib import Path
from typing import Iterable, List

from live_playlist.provider import MatchProvider
from live_playlist.schemas import Match, PlayUrl
from live_playlist.utils.helpers import join_names

logger = logging.getLogger("playlist")

M3U_HEADER = "#EXTM3U"


def format_commentators(names: Iterable[str]) -> str:
    """Commentator names joined with " & ", or "Unknown" if there are none."""
    return join_names(names, separator=" & ", default="Unknown")


def generate_m3u_entry(match: Match, play_url: PlayUrl, include_commentators: bool = True) -> str:
    """Format one playlist entry for a match stream."""
    display_name = f"{match.name} - {play_url.name}"
    title = display_name
    if include_commentators:
        title = f"{display_name} - {format_commentators(match.commentator_names)}"

    extinf = (
        f'#EXTINF:-1 tvg-id="{match.id}" tvg-name="{display_name}" '
        f'tvg-logo="{match.tournament.logo}" group-title="{match.tournament.name}",{title}'
    )
    return f"{extinf}\n{play_url.url}"


def render_playlist(entries: Iterable[str]) -> str:
    """Header line followed by the entries, newline-joined."""
    return "\n".join([M3U_HEADER, *entries])


def write_playlist(content: str, path: Path) -> bool:
    """
    Write playlist text, creating the parent folder if needed.

    The file is fully overwritten. Write failures are logged, not raised.

    Returns:
        True if the file was written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Error writing the playlist file {path}: {e}")
        return False

    logger.info(f"Playlist file written to: {path}")
    return True


class PlaylistGenerator:
    """Turns live matches into playlist entries, one per HD stream."""

    def __init__(self, provider: MatchProvider, include_commentators: bool = True):
        self._provider = provider
        self._include_commentators = include_commentators

    def build_entries(self, matches: Iterable[Match]) -> List[str]:
        """
        Resolve streams for each match in order and format their entries.

        Matches whose streams could not be resolved contribute nothing.
        """
        entries: List[str] = []
        for match in matches:
            play_urls = self._provider.get_filtered_play_urls(match.id)
            if play_urls.failed:
                logger.debug(f"Skipping match {match.id}: streams unresolved")
                continue

            for play_url in play_urls:
                entries.append(
                    generate_m3u_entry(match, play_url, self._include_commentators)
                )
        return entries

    def generate(self, matches: Iterable[Match], path: Path) -> bool:
        """Build the full playlist for the matches and write it to path."""
        entries = self.build_entries(matches)
        logger.info(f"Generated {len(entries)} playlist entries")
        return write_playlist(render_playlist(entries), path)
