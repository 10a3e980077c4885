"""Badge colors for elemental types."""

from __future__ import annotations

from typing import Dict, Optional

TYPE_COLORS: Dict[str, str] = {
    "normal": "#A8A878",
    "fire": "#F08030",
    "water": "#6890F0",
    "electric": "#F8D030",
    "grass": "#78C850",
    "ice": "#98D8D8",
    "fighting": "#C03028",
    "poison": "#A040A0",
    "ground": "#E0C068",
    "flying": "#A890F0",
    "psychic": "#F85888",
    "bug": "#A8B820",
    "rock": "#B8A038",
    "ghost": "#705898",
    "dragon": "#7038F8",
    "dark": "#705848",
    "steel": "#B8B8D0",
    "fairy": "#EE99AC",
}

FALLBACK_COLOR = "#777"


def get_type_color(type_name: Optional[str]) -> str:
    """Return the badge color for a type name.

    Args:
        type_name: PokeAPI type name (case-insensitive).

    Returns:
        Hex color string; FALLBACK_COLOR for unknown types.
    """
    if not isinstance(type_name, str):
        return FALLBACK_COLOR
    return TYPE_COLORS.get(type_name.strip().lower(), FALLBACK_COLOR)
