"""Evolution chain resolution."""
import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

from .client import PokeApiClient
from .models import ChainLink, Species

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvolutionInfo:
    """Evolution status of one species."""
    is_final_evolution: bool
    has_further_evolutions: bool


# Assumed when evolution data was never fetched for a species
DEFAULT_EVOLUTION_INFO = EvolutionInfo(is_final_evolution=False, has_further_evolutions=True)


def final_evolutions(chain: ChainLink) -> List[str]:
    """Names of every leaf of an evolution tree.

    Handles branching chains (e.g. Eevee). A chain with a single stage is its
    own only leaf.
    """
    leaves: List[str] = []
    visited = set()
    stack = [chain]

    while stack:
        node = stack.pop()
        name = node.species.name
        if name in visited:
            continue
        visited.add(name)

        if not node.evolves_to:
            leaves.append(name)
        else:
            # Reversed so branches are walked in listed order
            stack.extend(reversed(node.evolves_to))

    return leaves


def evolution_info(name: str, leaves: Sequence[str]) -> EvolutionInfo:
    is_final = name in leaves
    return EvolutionInfo(
        is_final_evolution=is_final,
        has_further_evolutions=len(leaves) > 0 and not is_final,
    )


class EvolutionChainResolver:
    """Work out which species of a list are fully evolved."""

    def __init__(self, client: PokeApiClient):
        self.client = client

    async def resolve(self, species: Sequence[Species]) -> Dict[str, EvolutionInfo]:
        """Resolve evolution status for every species.

        Any failed fetch propagates and aborts the whole resolution.

        Returns:
            Dict of species name -> EvolutionInfo
        """
        metas = await asyncio.gather(
            *(self.client.pokemon_species(s.name) for s in species)
        )
        chain_url_by_species = {m.name: m.evolution_chain.url for m in metas}

        chain_urls = list(dict.fromkeys(chain_url_by_species.values()))
        chains = await asyncio.gather(
            *(self.client.evolution_chain(url) for url in chain_urls)
        )
        leaves_by_url = {
            url: final_evolutions(chain.chain) for url, chain in zip(chain_urls, chains)
        }
        logger.info(
            f"Resolved {len(chain_urls)} evolution chains for {len(species)} species"
        )

        return {
            s.name: evolution_info(s.name, leaves_by_url[chain_url_by_species[s.name]])
            for s in species
        }
