"""
Pydantic schemas for the match API payloads.

All upstream JSON passes through parse_fixture_response / parse_meta_response,
so the rest of the pipeline only ever sees validated models.
"""
import json
import logging
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ValidationError, field_validator

from live_playlist.errors import UnexpectedDataError
from live_playlist.utils.helpers import safe_str

logger = logging.getLogger("schemas")


# ===== MATCH SCHEMAS =====

class Commentator(BaseModel):
    """A commentator attached to a match broadcast"""
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _name_as_text(cls, value: Any) -> str:
        return safe_str(value)


class Tournament(BaseModel):
    """Tournament a match belongs to (used as the playlist group)"""
    name: str = ""
    logo: str = ""

    @field_validator("name", "logo", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        return safe_str(value)


class Match(BaseModel):
    """A fixture entry from the fixture-by-date endpoint"""
    id: str
    name: str = ""
    is_live: bool = False
    tournament: Tournament = Tournament()
    commentators: List[Commentator] = []

    class Config:
        coerce_numbers_to_str = True

    @field_validator("name", mode="before")
    @classmethod
    def _name_as_text(cls, value: Any) -> str:
        return safe_str(value)

    @field_validator("tournament", mode="before")
    @classmethod
    def _tournament_or_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("commentators", mode="before")
    @classmethod
    def _commentators_or_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def commentator_names(self) -> List[str]:
        """Commentator names in broadcast order."""
        return [c.name for c in self.commentators]


# ===== STREAM SCHEMAS =====

class PlayUrl(BaseModel):
    """One stream variant of a match ("HD", "FullHD", "SD", ...)"""
    name: str
    url: str

    def is_high_definition(self, markers: Sequence[str]) -> bool:
        """Plain, case-sensitive substring test against the quality label."""
        return any(marker in self.name for marker in markers)


class MatchMeta(BaseModel):
    """Per-match metadata from /match/{id}/meta"""
    play_urls: List[PlayUrl]
    id: Optional[str] = None

    class Config:
        coerce_numbers_to_str = True


class MetaResponse(BaseModel):
    """Envelope returned by /match/{id}/meta"""
    data: Optional[MatchMeta] = None


# ===== BOUNDARY PARSERS =====

def _envelope_data(payload: Any) -> Any:
    if isinstance(payload, dict):
        return payload.get("data")
    return None


def parse_fixture_response(payload: Any) -> List[Match]:
    """
    Validate a fixture response and return its live matches, in order.

    Only entries flagged live are validated. A malformed live entry is
    logged and skipped; it does not hide the other live matches.

    Raises:
        UnexpectedDataError: if `data` is not a list
    """
    data = _envelope_data(payload)
    if not isinstance(data, list):
        raise UnexpectedDataError(
            f"Response data is not an array: {json.dumps(data, default=str)}"
        )

    matches = []
    for entry in data:
        if not isinstance(entry, dict) or not entry.get("is_live"):
            continue
        try:
            matches.append(Match.model_validate(entry))
        except ValidationError as e:
            logger.warning(f"Skipping malformed live match {entry.get('id')!r}: {e}")

    return matches


def parse_meta_response(payload: Any, match_id: str) -> MatchMeta:
    """
    Validate a meta response for one match.

    Raises:
        UnexpectedDataError: if `data` is missing/falsy or lacks play_urls
    """
    if not _envelope_data(payload):
        raise UnexpectedDataError(f"No meta data found for match ID {match_id}")

    try:
        meta = MetaResponse.model_validate(payload).data
    except ValidationError as e:
        raise UnexpectedDataError(f"Invalid meta data for match ID {match_id}: {e}") from e

    return meta
