"""Configuration management using pydantic-settings."""
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Upstream match API (unauthenticated)
    api_base_url: str = "https://api.vebo.xyz/api"

    # None keeps the requests default (no timeout)
    request_timeout: Optional[float] = None

    # Output settings
    output_directory: Path = Path("stream")
    playlist_filename: str = "playlist.m3u"

    # "Today" is computed at this fixed offset from UTC, not host local time
    utc_offset_hours: int = 7

    # Stream labels must contain one of these (case-sensitive)
    hd_markers: List[str] = ["HD", "FullHD"]

    # Append " - <commentators>" to each entry title
    include_commentators: bool = True

    log_level: str = "INFO"

    @property
    def playlist_path(self) -> Path:
        """Full path of the playlist file."""
        return self.output_directory / self.playlist_filename

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
