"""Stateless HTML rendering of the viewer state through Jinja templates."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .colors import get_type_color
from .models import PokemonProfile, ViewState, ViewStatus

# Fixed maximum used to scale stat bars.
STAT_MAX = 255

TEMPLATE_DIR = Path(__file__).parent / "templates"


def stat_bar_percent(value: int) -> float:
    """Return the fill width of a stat bar, clamped to 0-100."""
    return max(0.0, min(100.0, value / STAT_MAX * 100))


def display_name(name: str) -> str:
    return name[:1].upper() + name[1:]


env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
# helpers: consistent labels and colors inside templates
env.filters["display_name"] = display_name
env.filters["stat_percent"] = stat_bar_percent
env.filters["type_color"] = get_type_color


def render_profile(profile: PokemonProfile) -> str:
    """Render a profile card.

    Args:
        profile: Profile to display.

    Returns:
        HTML fragment with artwork, types, stat bars, evolution chain, and
        the first few moves.
    """
    return env.get_template("profile_card.html").render(profile=profile)


def render_error(message: str) -> str:
    return env.get_template("error.html").render(message=message)


def render_loading(query: str) -> str:
    return env.get_template("loading.html").render(query=query)


def render_state(state: ViewState) -> str:
    """Render whatever the viewer state currently holds."""
    if state.status is ViewStatus.FETCHING:
        return render_loading(state.query or "")
    if state.status is ViewStatus.ERROR and state.error:
        return render_error(state.error)
    if state.status is ViewStatus.SUCCESS and state.profile is not None:
        return render_profile(state.profile)
    return ""
