"""Pydantic models for Pokemon profiles and the viewer state."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Moves beyond this count are kept on the profile but never displayed.
MAX_DISPLAYED_MOVES = 8


# --- Profile building blocks ---


class EvolutionStep(BaseModel):
    """One species in a flattened evolution chain."""

    name: str
    min_level: Optional[int] = Field(
        default=None, description="Minimum level to evolve into this species, if level-based"
    )


class StatEntry(BaseModel):
    """Base stat value; 255 is the scale maximum used for stat bars."""

    name: str
    value: int


class MoveEntry(BaseModel):
    """Learnset entry with the level it is first learned at."""

    name: str
    level_learned: int = 1


# --- Profile ---


class PokemonProfile(BaseModel):
    """Display-ready profile assembled from the pokemon, species, and chain payloads."""

    id: int = Field(description="National Pokedex number")
    name: str
    types: List[str]
    stats: List[StatEntry]
    # Sorted ascending by level_learned; ties keep API order.
    moves: List[MoveEntry]
    image_url: Optional[str] = Field(
        default=None, description="Official artwork URL (may be None if unavailable)"
    )
    # Keep both raw and derived units so clients can pick a display.
    height_dm: int = Field(description="Height in decimeters (as provided by API)")
    height_m: float = Field(description="Height in meters (derived)")
    weight_hg: int = Field(description="Weight in hectograms (as provided by API)")
    weight_kg: float = Field(description="Weight in kilograms (derived)")
    evolutions: List[EvolutionStep]

    @property
    def displayed_moves(self) -> List[MoveEntry]:
        """Return the moves surfaced to the viewer."""
        return self.moves[:MAX_DISPLAYED_MOVES]


# --- Viewer state ---


class ViewStatus(str, Enum):
    """Lifecycle of the viewer's single result slot."""

    IDLE = "idle"
    FETCHING = "fetching"
    SUCCESS = "success"
    ERROR = "error"


class ViewState(BaseModel):
    """Immutable snapshot of what the viewer currently shows.

    A state never carries both a profile and an error. Success carries a
    profile, error carries a message, idle carries neither, and fetching keeps
    whichever one the previous state had.
    """

    model_config = ConfigDict(frozen=True)

    status: ViewStatus = ViewStatus.IDLE
    request_id: int = 0
    query: Optional[str] = None
    profile: Optional[PokemonProfile] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_outcome_matches_status(self) -> "ViewState":
        if self.profile is not None and self.error is not None:
            raise ValueError("a view state cannot hold both a profile and an error")
        if self.status is ViewStatus.SUCCESS and self.profile is None:
            raise ValueError("a success state needs a profile")
        if self.status is ViewStatus.ERROR and not self.error:
            raise ValueError("an error state needs an error message")
        if self.status is ViewStatus.IDLE and (self.profile is not None or self.error is not None):
            raise ValueError("an idle state holds no profile or error")
        return self
