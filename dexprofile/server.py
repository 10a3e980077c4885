"""Expose FastMCP tools for Pokemon profile lookups."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .colors import get_type_color as _get_type_color
from .logging_config import setup_logging
from .models import PokemonProfile
from .profile import fetch_profile as _fetch_profile

# Each decorated function becomes a structured tool discoverable by MCP hosts.
mcp = FastMCP("DexProfile Server")


@mcp.tool()
def get_profile(name_or_dex: str) -> PokemonProfile:
    """Fetch a display profile for the given identifier.

    Args:
        name_or_dex: Pokemon name or national dex number.

    Returns:
        Types, stats, level-sorted moves, artwork, measurements, and the
        evolution chain (first branch only).
    """
    # Delegate to the core helper for consistent behavior.
    return _fetch_profile(name_or_dex)


@mcp.tool()
def get_type_color(type_name: str) -> str:
    """Return the badge color used for a Pokemon type.

    Args:
        type_name: Type name (e.g., "fire").

    Returns:
        Hex color string; a neutral gray for unknown types.
    """
    return _get_type_color(type_name)


if __name__ == "__main__":
    setup_logging()
    mcp.run()
