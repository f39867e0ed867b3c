"""Client for the PokeAPI data service."""
import asyncio
import logging
from typing import Any, List, Optional

import requests
from requests.adapters import HTTPAdapter

from randteam.config import ApiConfig
from randteam.errors import RemoteError
from .models import (
    EvolutionChain,
    GenerationalResource,
    GenerationListing,
    PokemonDetail,
    Species,
    SpeciesMeta,
)

logger = logging.getLogger(__name__)


class PokeApiClient:
    """Read-only JSON client for PokeAPI.

    Blocking calls go through a shared `requests.Session`; `fetch` runs them
    on a worker thread so callers can fan out with `asyncio.gather`.
    """

    def __init__(self, config: Optional[ApiConfig] = None):
        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip("/")
        self.session = requests.Session()
        adapter = HTTPAdapter(pool_maxsize=self.config.pool_size)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def url_for(self, resource: str, identifier: Any) -> str:
        """Build the URL of a named or numbered resource."""
        return f"{self.base_url}/{resource}/{identifier}"

    def get_json(self, url: str) -> Any:
        """Fetch a URL and decode its JSON body.

        Raises:
            RemoteError: if the response status is not successful
        """
        logger.debug(f"GET {url}")
        response = self.session.get(url, timeout=self.config.timeout)
        if not response.ok:
            raise RemoteError(response.status_code, url)
        return response.json()

    async def fetch(self, url: str) -> Any:
        """Fetch a URL without blocking the event loop."""
        return await asyncio.to_thread(self.get_json, url)

    async def generation_species(self, gen: int) -> List[Species]:
        """List the species introduced in a generation."""
        data = await self.fetch(self.url_for("generation", gen))
        return GenerationListing.model_validate(data).pokemon_species

    async def pokemon(self, name: str) -> PokemonDetail:
        data = await self.fetch(self.url_for("pokemon", name))
        return PokemonDetail.model_validate(data)

    async def pokemon_species(self, name: str) -> SpeciesMeta:
        data = await self.fetch(self.url_for("pokemon-species", name))
        return SpeciesMeta.model_validate(data)

    async def evolution_chain(self, url: str) -> EvolutionChain:
        data = await self.fetch(url)
        return EvolutionChain.model_validate(data)

    async def move(self, name: str) -> GenerationalResource:
        data = await self.fetch(self.url_for("move", name))
        return GenerationalResource.model_validate(data)

    async def ability(self, name: str) -> GenerationalResource:
        data = await self.fetch(self.url_for("ability", name))
        return GenerationalResource.model_validate(data)

    def close(self) -> None:
        """Close pooled connections."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
