"""Models for PokeAPI responses."""
from typing import List, Optional
from pydantic import BaseModel


class NamedResource(BaseModel):
    """A `{name, url}` reference to another resource."""
    name: str
    url: str


# A species as listed by a generation
Species = NamedResource


class ApiResource(BaseModel):
    """An unnamed reference, e.g. an evolution chain link."""
    url: str


class GenerationListing(BaseModel):
    """`/generation/{id}`: the species introduced in a generation."""
    id: Optional[int] = None
    name: str
    pokemon_species: List[Species]


class VersionGroupDetail(BaseModel):
    """How a move is learned in one version group."""
    version_group: NamedResource
    level_learned_at: int = 0
    move_learn_method: Optional[NamedResource] = None


class MoveEntry(BaseModel):
    move: NamedResource
    version_group_details: List[VersionGroupDetail] = []


class AbilityEntry(BaseModel):
    ability: NamedResource
    is_hidden: bool = False
    slot: int = 1


class PokemonDetail(BaseModel):
    """`/pokemon/{name}`: learnsets and abilities across all games."""
    id: Optional[int] = None
    name: str
    moves: List[MoveEntry] = []
    abilities: List[AbilityEntry] = []


class SpeciesMeta(BaseModel):
    """`/pokemon-species/{name}`: carries the evolution chain link."""
    id: Optional[int] = None
    name: str
    evolution_chain: ApiResource


class ChainLink(BaseModel):
    """One stage of an evolution chain."""
    species: NamedResource
    evolves_to: List["ChainLink"] = []


class EvolutionChain(BaseModel):
    """`/evolution-chain/{id}`: the full evolution tree."""
    id: Optional[int] = None
    chain: ChainLink


class GenerationalResource(BaseModel):
    """`/move/{name}` or `/ability/{name}`, reduced to its introduction."""
    name: str
    generation: NamedResource


class SpeciesDetail(BaseModel):
    """A pokemon's moves and abilities, filtered to one generation."""
    name: str
    moves: List[str] = []
    abilities: List[str] = []
