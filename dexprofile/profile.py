"""Profile lookup: chained PokeAPI fetches and display field derivation."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from . import api
from .api import PokemonNotFoundError
from .evolution import flatten_chain
from .models import MoveEntry, PokemonProfile, StatEntry

logger = logging.getLogger(__name__)


def normalize_query(query: Optional[str]) -> str:
    """Trim and lowercase a user-supplied name or dex number."""
    return (query or "").strip().lower()


def _extract_types(pokemon: Dict) -> List[str]:
    return [entry["type"]["name"] for entry in pokemon["types"]]


def _extract_stats(pokemon: Dict) -> List[StatEntry]:
    return [
        StatEntry(name=entry["stat"]["name"], value=entry["base_stat"])
        for entry in pokemon["stats"]
    ]


def _extract_moves(pokemon: Dict) -> List[MoveEntry]:
    """Map learnset entries to moves sorted by the level they are learned at.

    Args:
        pokemon: Raw pokemon payload.

    Returns:
        Moves in ascending level order; equal levels keep API order.
    """
    moves: List[MoveEntry] = []
    for entry in pokemon.get("moves", []):
        # Only the first version group is consulted; a missing or zero level
        # (machine and tutor moves) counts as level 1.
        details = entry.get("version_group_details") or []
        level = (details[0] or {}).get("level_learned_at") if details else None
        moves.append(MoveEntry(name=entry["move"]["name"], level_learned=level or 1))
    # sorted() is stable, so ties keep API order.
    return sorted(moves, key=lambda move: move.level_learned)


def _extract_image(pokemon: Dict) -> Optional[str]:
    sprites = pokemon.get("sprites") or {}
    artwork = (sprites.get("other") or {}).get("official-artwork") or {}
    return artwork.get("front_default")


def _build_profile(pokemon: Dict, chain_data: Dict) -> PokemonProfile:
    """Assemble a profile from the pokemon payload and its evolution chain payload."""
    # Height and weight keep both raw and derived units so clients can choose the display they prefer.
    return PokemonProfile(
        id=pokemon["id"],
        name=pokemon["name"],
        types=_extract_types(pokemon),
        stats=_extract_stats(pokemon),
        moves=_extract_moves(pokemon),
        image_url=_extract_image(pokemon),
        height_dm=pokemon["height"],  # decimeters per PokeAPI
        height_m=pokemon["height"] / 10,  # convert dm -> m
        weight_hg=pokemon["weight"],  # hectograms per PokeAPI
        weight_kg=pokemon["weight"] / 10,  # convert hg -> kg
        evolutions=flatten_chain(chain_data["chain"]),
    )


def fetch_profile(query: str) -> PokemonProfile:
    """Look up a Pokemon and build its display profile.

    Issues three sequential requests: the pokemon resource, the species URL it
    links to, and the evolution chain URL the species links to. Nothing is
    cached between calls.

    Args:
        query: Pokemon name (case-insensitive) or national dex number.

    Returns:
        The complete profile.

    Raises:
        PokemonNotFoundError: If any fetch fails or a payload is malformed.
    """
    name_or_dex = normalize_query(query)
    if not name_or_dex.strip("."):
        # Empty, "." and ".." identifiers would resolve to the resource listing, not a Pokemon.
        raise PokemonNotFoundError("Pokemon not found: empty query", query=query)

    logger.info("Looking up Pokemon '%s'", name_or_dex)
    try:
        pokemon = api._fetch_json(api.pokemon_url(name_or_dex), context=f"pokemon {name_or_dex}")
        species = api._fetch_json(
            pokemon["species"]["url"],
            context=f"species data for {pokemon['name']}",
        )
        chain_data = api._fetch_json(species["evolution_chain"]["url"], context="evolution chain")
        profile = _build_profile(pokemon, chain_data)
    except (KeyError, TypeError, IndexError, AttributeError, ValueError) as exc:
        # PokemonNotFoundError and pydantic ValidationError are both ValueErrors.
        if not isinstance(exc, PokemonNotFoundError):
            logger.warning("Malformed PokeAPI payload for '%s': %r", name_or_dex, exc)
        raise PokemonNotFoundError(
            f"Could not find Pokemon '{name_or_dex}': {exc}", query=name_or_dex
        ) from exc

    logger.info("Built profile for #%d %s", profile.id, profile.name)
    return profile
