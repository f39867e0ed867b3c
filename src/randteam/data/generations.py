"""Lookup of the generation a move or ability was introduced in."""
import asyncio
import logging
import re
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from .client import PokeApiClient

logger = logging.getLogger(__name__)

GENERATION_URL_PATTERN = re.compile(r"generation/(\d+)/?$")


class ResourceKind(str, Enum):
    MOVE = "move"
    ABILITY = "ability"


def parse_generation_number(url: str) -> int:
    """Extract the trailing number of a generation URL.

    >>> parse_generation_number("https://pokeapi.co/api/v2/generation/3/")
    3
    """
    match = GENERATION_URL_PATTERN.search(url)
    if not match:
        raise ValueError(f"Not a generation URL: {url}")
    return int(match.group(1))


class GenCache:
    """Memo of (kind, name) -> introduction generation.

    Entries are never evicted. Writes are idempotent, so two lookups racing
    on the same key are harmless.
    """

    def __init__(self):
        self._entries: Dict[Tuple[ResourceKind, str], int] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Tuple[ResourceKind, str]) -> bool:
        return key in self._entries

    def get(self, kind: ResourceKind, name: str) -> Optional[int]:
        return self._entries.get((kind, name))

    def set(self, kind: ResourceKind, name: str, generation: int) -> None:
        self._entries[(kind, name)] = generation


# Shared by resolvers that are not handed their own cache
default_cache = GenCache()


class GenResolver:
    """Resolve introduction generations through an injected cache."""

    def __init__(self, client: PokeApiClient, cache: Optional[GenCache] = None):
        self.client = client
        self.cache = cache if cache is not None else default_cache

    async def generation_of(self, kind: ResourceKind, name: str) -> int:
        """Generation `name` was introduced in, fetching it on first use."""
        cached = self.cache.get(kind, name)
        if cached is not None:
            return cached

        if kind is ResourceKind.MOVE:
            resource = await self.client.move(name)
        else:
            resource = await self.client.ability(name)

        generation = parse_generation_number(resource.generation.url)
        self.cache.set(kind, name, generation)
        logger.debug(f"{kind.value} {name} introduced in gen {generation}")
        return generation

    async def move_generation(self, name: str) -> int:
        return await self.generation_of(ResourceKind.MOVE, name)

    async def ability_generation(self, name: str) -> int:
        return await self.generation_of(ResourceKind.ABILITY, name)

    async def filter_introduced(
        self, kind: ResourceKind, names: Iterable[str], gen: int
    ) -> List[str]:
        """Keep the names introduced in or before `gen`, preserving order."""
        names = list(names)
        generations = await asyncio.gather(
            *(self.generation_of(kind, name) for name in names)
        )
        return [name for name, g in zip(names, generations) if g <= gen]
