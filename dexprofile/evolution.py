"""Evolution chain flattening."""

from __future__ import annotations

from typing import Dict, List, Optional

from .models import EvolutionStep


def _first_min_level(node: Dict) -> Optional[int]:
    """Return the first evolution detail's minimum level, if any."""
    details = node.get("evolution_details") or []
    if not details:
        return None
    # A level of 0 means no level requirement, same as a missing value.
    return (details[0] or {}).get("min_level") or None


def flatten_chain(node: Dict) -> List[EvolutionStep]:
    """Flatten an evolution chain tree into a single ordered path.

    Only the first successor is followed at each node, so branching chains
    (e.g. Eevee) are truncated to their first branch.

    Args:
        node: Root node of the PokeAPI evolution chain (``payload["chain"]``).

    Returns:
        Evolution steps from the base form to the last form on the path.
    """
    steps: List[EvolutionStep] = []
    current: Optional[Dict] = node
    while current:
        steps.append(
            EvolutionStep(
                name=current["species"]["name"],
                min_level=_first_min_level(current),
            )
        )
        successors = current.get("evolves_to") or []
        current = successors[0] if successors else None
    return steps
