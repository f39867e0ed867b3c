"""Pytest configuration and shared fixtures."""
from types import SimpleNamespace
from typing import Dict, List, Optional

import pytest

from randteam.config import ApiConfig
from randteam.data.client import PokeApiClient
from randteam.errors import RemoteError

BASE_URL = "https://pokeapi.test/api/v2"


class FakeClient(PokeApiClient):
    """Client serving canned payloads instead of hitting the network."""

    def __init__(self, routes: Optional[Dict[str, dict]] = None):
        super().__init__(ApiConfig(base_url=BASE_URL))
        self.routes = dict(routes or {})
        self.calls: List[str] = []

    def get_json(self, url: str):
        self.calls.append(url)
        if url not in self.routes:
            raise RemoteError(404, url)
        return self.routes[url]

    def calls_to(self, resource: str) -> List[str]:
        prefix = f"{BASE_URL}/{resource}/"
        return [c for c in self.calls if c.startswith(prefix)]


def url(resource: str, identifier) -> str:
    return f"{BASE_URL}/{resource}/{identifier}"


def named(resource: str, name) -> dict:
    return {"name": str(name), "url": url(resource, name) + "/"}


def move_entry(name: str, *version_groups: str) -> dict:
    return {
        "move": named("move", name),
        "version_group_details": [
            {
                "level_learned_at": 1,
                "move_learn_method": named("move-learn-method", "level-up"),
                "version_group": named("version-group", vg),
            }
            for vg in version_groups
        ],
    }


def pokemon_payload(name: str, moves: List[dict], abilities: List[str]) -> dict:
    return {
        "id": 1,
        "name": name,
        "moves": moves,
        "abilities": [
            {"ability": named("ability", a), "is_hidden": False, "slot": i + 1}
            for i, a in enumerate(abilities)
        ],
    }


def generation_payload(gen: int, species: List[str]) -> dict:
    return {
        "id": gen,
        "name": f"generation-{gen}",
        "pokemon_species": [named("pokemon-species", s) for s in species],
    }


def introduced_payload(name: str, gen: int) -> dict:
    return {"name": name, "generation": named("generation", gen)}


def chain_node(name: str, *children: dict) -> dict:
    return {"species": named("pokemon-species", name), "evolves_to": list(children)}


def add_chain(routes: Dict[str, dict], chain_id: int, root: dict) -> None:
    """Register an evolution chain and the species metadata pointing at it."""
    chain_url = url("evolution-chain", chain_id) + "/"
    routes[chain_url] = {"id": chain_id, "chain": root}

    stack = [root]
    while stack:
        node = stack.pop()
        name = node["species"]["name"]
        routes[url("pokemon-species", name)] = {
            "id": chain_id,
            "name": name,
            "evolution_chain": {"url": chain_url},
        }
        stack.extend(node["evolves_to"])


# Kanto-style fixture world: 16 species, 9 of them fully evolved
KANTO_CHAINS = [
    chain_node("bulbasaur", chain_node("ivysaur", chain_node("venusaur"))),
    chain_node("charmander", chain_node("charmeleon", chain_node("charizard"))),
    chain_node("squirtle", chain_node("wartortle", chain_node("blastoise"))),
    chain_node("eevee", chain_node("vaporeon"), chain_node("jolteon"), chain_node("flareon")),
    chain_node("tauros"),
    chain_node("lapras"),
    chain_node("ditto"),
]

KANTO_FINALS = {
    "venusaur", "charizard", "blastoise", "vaporeon", "jolteon", "flareon",
    "tauros", "lapras", "ditto",
}

KANTO_SPECIES = [
    "bulbasaur", "ivysaur", "venusaur", "charmander", "charmeleon", "charizard",
    "squirtle", "wartortle", "blastoise", "eevee", "vaporeon", "jolteon",
    "flareon", "tauros", "lapras", "ditto",
]

MOVE_SET = [
    move_entry("tackle", "red-blue", "yellow", "emerald"),
    move_entry("body-slam", "yellow", "emerald", "black-white"),
    move_entry("hyper-beam", "red-blue", "gold-silver"),
    move_entry("double-edge", "red-blue", "emerald"),
    move_entry("rest", "red-blue", "emerald", "black-white"),
    move_entry("protect", "emerald", "black-white"),
    move_entry("flamethrower", "x-y"),
]

ABILITY_GENERATIONS = {"overgrow": 3, "pressure": 3, "sand-rush": 5}


def build_world(gen: int = 1, species: Optional[List[str]] = None) -> Dict[str, dict]:
    """Routes for a generation listing plus every species it names."""
    species = KANTO_SPECIES if species is None else species
    routes = {url("generation", gen): generation_payload(gen, species)}

    for name in species:
        routes[url("pokemon", name)] = pokemon_payload(
            name, MOVE_SET, ["overgrow", "sand-rush"]
        )
    for ability, introduced in ABILITY_GENERATIONS.items():
        routes[url("ability", ability)] = introduced_payload(ability, introduced)
    for i, root in enumerate(KANTO_CHAINS, start=1):
        add_chain(routes, i, root)

    return routes


@pytest.fixture
def kanto_routes():
    return build_world(gen=1)


@pytest.fixture
def kanto_client(kanto_routes):
    return FakeClient(kanto_routes)


@pytest.fixture
def make_client():
    """Factory for a FakeClient over the given routes."""
    return FakeClient


@pytest.fixture
def world():
    """Factory for a generation's routes; see `build_world`."""
    return build_world


@pytest.fixture
def payloads():
    """Builders for canned PokeAPI payloads."""
    return SimpleNamespace(
        base_url=BASE_URL,
        url=url,
        named=named,
        move_entry=move_entry,
        pokemon=pokemon_payload,
        generation=generation_payload,
        introduced=introduced_payload,
        chain_node=chain_node,
        add_chain=add_chain,
        kanto_finals=KANTO_FINALS,
        kanto_species=KANTO_SPECIES,
    )
