from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

import dexprofile.api as api
import dexprofile.config as config

BASE_URL = "https://pokeapi.test/api/v2"

# (move name, version group details) in API order. None means an empty detail list.
BULBASAUR_MOVES: Sequence[Tuple[str, Optional[List[Dict[str, Any]]]]] = (
    ("vine-whip", [{"level_learned_at": 3}]),
    ("razor-wind", [{"level_learned_at": 0}]),
    ("tackle", [{"level_learned_at": 1}]),
    ("sleep-powder", [{"level_learned_at": 15}]),
    ("swords-dance", None),
    ("leech-seed", [{"level_learned_at": 7}, {"level_learned_at": 9}]),
    ("growl", [{"level_learned_at": 1}]),
    ("poison-powder", [{"level_learned_at": 15}]),
    ("take-down", [{"level_learned_at": 27}]),
    ("solar-beam", [{"level_learned_at": 37}]),
    ("razor-leaf", [{"level_learned_at": 12}]),
    ("growth", [{"level_learned_at": 32}]),
)


def _stats(hp: int, attack: int, defense: int, sp_atk: int, sp_def: int, speed: int) -> List[Dict[str, Any]]:
    values = {
        "hp": hp,
        "attack": attack,
        "defense": defense,
        "special-attack": sp_atk,
        "special-defense": sp_def,
        "speed": speed,
    }
    return [{"base_stat": value, "effort": 0, "stat": {"name": name}} for name, value in values.items()]


def make_pokemon(
    dex: int,
    name: str,
    types: Sequence[str],
    stats: List[Dict[str, Any]],
    height: int,
    weight: int,
    moves: Sequence[Tuple[str, Optional[List[Dict[str, Any]]]]] = (),
    artwork: Optional[str] = "default",
) -> Dict[str, Any]:
    """Build a trimmed-down PokeAPI pokemon payload."""
    if artwork == "default":
        artwork = f"https://img.pokeapi.test/official-artwork/{dex}.png"
    return {
        "id": dex,
        "name": name,
        "height": height,
        "weight": weight,
        "species": {"name": name, "url": f"{BASE_URL}/pokemon-species/{dex}/"},
        "types": [{"slot": slot, "type": {"name": t}} for slot, t in enumerate(types, start=1)],
        "stats": stats,
        "moves": [
            {"move": {"name": move_name}, "version_group_details": details or []}
            for move_name, details in moves
        ],
        "sprites": {
            "front_default": f"https://img.pokeapi.test/{dex}.png",
            "other": {"official-artwork": {"front_default": artwork}},
        },
    }


def make_species(dex: int, name: str, chain_id: int) -> Dict[str, Any]:
    return {
        "id": dex,
        "name": name,
        "evolution_chain": {"url": f"{BASE_URL}/evolution-chain/{chain_id}/"},
    }


BULBASAUR_CHAIN = {
    "id": 1,
    "chain": {
        "species": {"name": "bulbasaur"},
        "evolution_details": [],
        "evolves_to": [
            {
                "species": {"name": "ivysaur"},
                "evolution_details": [{"min_level": 16, "trigger": {"name": "level-up"}}],
                "evolves_to": [
                    {
                        "species": {"name": "venusaur"},
                        "evolution_details": [{"min_level": 32, "trigger": {"name": "level-up"}}],
                        "evolves_to": [],
                    }
                ],
            }
        ],
    },
}

EEVEE_CHAIN = {
    "id": 67,
    "chain": {
        "species": {"name": "eevee"},
        "evolution_details": [],
        "evolves_to": [
            {
                "species": {"name": "vaporeon"},
                "evolution_details": [
                    {"min_level": None, "item": {"name": "water-stone"}, "trigger": {"name": "use-item"}}
                ],
                "evolves_to": [],
            },
            {
                "species": {"name": "jolteon"},
                "evolution_details": [
                    {"min_level": None, "item": {"name": "thunder-stone"}, "trigger": {"name": "use-item"}}
                ],
                "evolves_to": [],
            },
            {
                "species": {"name": "flareon"},
                "evolution_details": [
                    {"min_level": None, "item": {"name": "fire-stone"}, "trigger": {"name": "use-item"}}
                ],
                "evolves_to": [],
            },
        ],
    },
}

DITTO_CHAIN = {"id": 66, "chain": {"species": {"name": "ditto"}, "evolution_details": [], "evolves_to": []}}


def _build_registry() -> Dict[str, Dict[str, Any]]:
    bulbasaur = make_pokemon(
        1, "bulbasaur", ["grass", "poison"], _stats(45, 49, 49, 65, 65, 45), 7, 69, BULBASAUR_MOVES
    )
    ivysaur = make_pokemon(
        2,
        "ivysaur",
        ["grass", "poison"],
        _stats(60, 62, 63, 80, 80, 60),
        10,
        130,
        [("tackle", [{"level_learned_at": 1}]), ("vine-whip", [{"level_learned_at": 1}])],
    )
    eevee = make_pokemon(
        133, "eevee", ["normal"], _stats(55, 55, 50, 45, 65, 55), 3, 65, [("tackle", [{"level_learned_at": 1}])]
    )
    ditto = make_pokemon(132, "ditto", ["normal"], _stats(48, 48, 48, 48, 48, 48), 3, 40, artwork=None)
    # Species URL leads nowhere, so the second fetch fails.
    orphan = make_pokemon(9001, "orphanmon", ["bug"], _stats(1, 1, 1, 1, 1, 1), 1, 1)
    # Payload missing the species link entirely.
    glitch = make_pokemon(9002, "glitchmon", ["???"], _stats(0, 0, 0, 0, 0, 0), 1, 1)
    del glitch["species"]

    registry: Dict[str, Dict[str, Any]] = {}
    for pokemon in (bulbasaur, ivysaur, eevee, ditto, orphan, glitch):
        registry[f"{BASE_URL}/pokemon/{pokemon['name']}"] = pokemon
        registry[f"{BASE_URL}/pokemon/{pokemon['id']}"] = pokemon

    for dex, name, chain_id in ((1, "bulbasaur", 1), (2, "ivysaur", 1), (133, "eevee", 67), (132, "ditto", 66)):
        registry[f"{BASE_URL}/pokemon-species/{dex}/"] = make_species(dex, name, chain_id)

    registry[f"{BASE_URL}/evolution-chain/1/"] = BULBASAUR_CHAIN
    registry[f"{BASE_URL}/evolution-chain/67/"] = EEVEE_CHAIN
    registry[f"{BASE_URL}/evolution-chain/66/"] = DITTO_CHAIN
    return registry


@pytest.fixture(autouse=True)
def stubbed_settings(monkeypatch: pytest.MonkeyPatch) -> config.Settings:
    settings = config.Settings(pokeapi_base_url=BASE_URL, pokeapi_timeout=1.0)
    monkeypatch.setattr(config, "settings", settings)
    return settings


@pytest.fixture
def pokeapi_registry() -> Dict[str, Dict[str, Any]]:
    # Expose registry for tests that need to inspect or tweak raw payloads.
    return _build_registry()


@pytest.fixture(autouse=True)
def pokeapi_stub(
    monkeypatch: pytest.MonkeyPatch, pokeapi_registry: Dict[str, Dict[str, Any]]
) -> List[str]:
    """Route api._fetch_json to the stub registry and record requested URLs."""
    requested: List[str] = []

    def fake_fetch_json(url: str, context: str) -> Dict[str, Any]:
        requested.append(url)
        if url in pokeapi_registry:
            return pokeapi_registry[url]
        raise api.PokemonNotFoundError(f"Failed to fetch {context}: 404 Client Error: Not Found for url: {url}")

    monkeypatch.setattr(api, "_fetch_json", fake_fetch_json)
    return requested
