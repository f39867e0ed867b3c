"""Random team assembly for a game generation."""
import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import requests
from pydantic import ValidationError

from randteam.config import GeneratorConfig
from randteam.data.client import PokeApiClient
from randteam.data.evolution import (
    DEFAULT_EVOLUTION_INFO,
    EvolutionChainResolver,
    EvolutionInfo,
)
from randteam.data.generations import GenResolver, ResourceKind
from randteam.data.legality import filter_moves, validate_generation
from randteam.data.models import Species, SpeciesDetail
from randteam.errors import InsufficientCandidatesError, RemoteError
from .items import random_item
from .models import Team, TeamMember, capitalize
from .randomizer import pick_random, random_evs, random_nature

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


@dataclass
class TeamOptions:
    """Flags chosen by the user for one team."""
    only_fully_evolved: bool = False
    randomize_evs: bool = False  # also randomizes the nature
    randomize_items: bool = False


class TeamAssembler:
    """Build a random team legal for a generation.

    Pipeline: list the generation's species, optionally resolve evolution
    status, shuffle, then fetch candidates in batches until the team is full.
    """

    def __init__(
        self,
        client: Optional[PokeApiClient] = None,
        config: Optional[GeneratorConfig] = None,
        gen_resolver: Optional[GenResolver] = None,
        evolution_resolver: Optional[EvolutionChainResolver] = None,
        rng: Optional[random.Random] = None,
    ):
        self.client = client or PokeApiClient()
        self.config = config or GeneratorConfig()
        self.gen_resolver = gen_resolver or GenResolver(self.client)
        self.evolution_resolver = evolution_resolver or EvolutionChainResolver(self.client)
        self.rng = rng or random.Random()

    async def generate(
        self,
        gen: int,
        options: Optional[TeamOptions] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> Team:
        """Generate a full team.

        Args:
            gen: Generation number (1-9)
            options: User flags; all off by default
            on_progress: Called with (candidates processed, sample size)
                after each batch

        Returns:
            Team with exactly `team_size` members

        Raises:
            OutOfRangeGenerationError: before any request is made
            InsufficientCandidatesError: if the sample runs out first
            RemoteError: if listing species or resolving evolutions fails
        """
        validate_generation(gen)
        options = options or TeamOptions()

        species = await self.client.generation_species(gen)
        logger.info(f"Gen {gen}: {len(species)} species listed")

        evolutions: Optional[Dict[str, EvolutionInfo]] = None
        if options.only_fully_evolved or options.randomize_items:
            # Item legality needs evolution status too
            evolutions = await self.evolution_resolver.resolve(species)
            if options.only_fully_evolved:
                species = [s for s in species if evolutions[s.name].is_final_evolution]
                logger.info(f"{len(species)} fully evolved species remain")

        sample = self._sample(species)
        members = await self._collect(sample, gen, options, evolutions, on_progress)

        if len(members) < self.config.team_size:
            raise InsufficientCandidatesError(len(members), self.config.team_size)
        return Team(members=members, generation=gen)

    def _sample(self, species: List[Species]) -> List[Species]:
        shuffled = list(species)
        self.rng.shuffle(shuffled)
        return shuffled[: self.config.sample_size]

    async def _collect(
        self,
        sample: List[Species],
        gen: int,
        options: TeamOptions,
        evolutions: Optional[Dict[str, EvolutionInfo]],
        on_progress: Optional[ProgressCallback],
    ) -> List[TeamMember]:
        members: List[TeamMember] = []
        batch_size = self.config.batch_size

        for start in range(0, len(sample), batch_size):
            if len(members) >= self.config.team_size:
                break

            batch = sample[start : start + batch_size]
            details = await asyncio.gather(
                *(self.fetch_candidate(s.name, gen) for s in batch)
            )
            for detail in details:
                if detail is None:
                    continue
                members.append(self._build_member(detail, gen, options, evolutions))
                if len(members) >= self.config.team_size:
                    break

            if on_progress:
                on_progress(min(start + batch_size, len(sample)), len(sample))

        logger.info(f"Assembled {len(members)} members from {len(sample)} candidates")
        return members

    async def fetch_candidate(self, name: str, gen: int) -> Optional[SpeciesDetail]:
        """Fetch a pokemon and filter its moves and abilities to `gen`.

        Returns None if the pokemon could not be fetched or its data is malformed.
        """
        try:
            data = await self.client.pokemon(name)
            abilities = await self.gen_resolver.filter_introduced(
                ResourceKind.ABILITY, [a.ability.name for a in data.abilities], gen
            )
        except (RemoteError, requests.RequestException, ValidationError, ValueError) as e:
            logger.warning(f"Failed to fetch data for {name}: {e}")
            return None

        return SpeciesDetail(
            name=data.name,
            moves=filter_moves(data.moves, gen),
            abilities=abilities,
        )

    def _build_member(
        self,
        detail: SpeciesDetail,
        gen: int,
        options: TeamOptions,
        evolutions: Optional[Dict[str, EvolutionInfo]],
    ) -> TeamMember:
        cfg = self.config
        moves = pick_random(detail.moves, cfg.max_moves, self.rng)

        ability = ""
        if gen >= cfg.min_ability_generation and detail.abilities:
            ability = pick_random(detail.abilities, 1, self.rng)[0]

        if options.randomize_evs:
            evs = random_evs(self.rng)
            nature = random_nature(self.rng)
        else:
            evs = dict(cfg.default_evs)
            nature = cfg.default_nature

        if options.randomize_items:
            evolution = (evolutions or {}).get(detail.name.lower(), DEFAULT_EVOLUTION_INFO)
            item = random_item(
                evolution.is_final_evolution,
                evolution.has_further_evolutions,
                gen,
                self.rng,
            )
        else:
            item = cfg.placeholder_item

        return TeamMember(
            name=capitalize(detail.name),
            moves=moves,
            ability=ability,
            evs=evs,
            nature=nature,
            item=item,
        )
