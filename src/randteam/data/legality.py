"""Which games count as move-learn evidence for each generation."""
from typing import Dict, Iterable, List, Tuple

from randteam.errors import OutOfRangeGenerationError
from .models import MoveEntry

SUPPORTED_GENERATIONS = range(1, 10)

GEN_VERSION_GROUPS: Dict[int, Tuple[str, ...]] = {
    1: ("red-blue", "yellow"),
    2: ("gold-silver", "crystal"),
    3: ("ruby-sapphire", "emerald", "firered-leafgreen"),
    4: ("diamond-pearl", "platinum", "heartgold-soulsilver"),
    5: ("black-white", "black-2-white-2"),
    6: ("x-y", "omega-ruby-alpha-sapphire"),
    7: ("sun-moon", "ultra-sun-ultra-moon"),
    8: ("sword-shield",),
    9: ("scarlet-violet",),
}


def validate_generation(gen: int) -> int:
    """Reject generations outside the supported range."""
    if gen not in SUPPORTED_GENERATIONS:
        raise OutOfRangeGenerationError(
            gen, SUPPORTED_GENERATIONS[0], SUPPORTED_GENERATIONS[-1]
        )
    return gen


def version_groups_for(gen: int) -> Tuple[str, ...]:
    """Version groups legal for a generation; empty for unknown generations."""
    return GEN_VERSION_GROUPS.get(gen, ())


def is_learnable(entry: MoveEntry, gen: int) -> bool:
    allowed = version_groups_for(gen)
    return any(d.version_group.name in allowed for d in entry.version_group_details)


def filter_moves(moves: Iterable[MoveEntry], gen: int) -> List[str]:
    """Names of the moves learnable in at least one of the generation's games."""
    return [entry.move.name for entry in moves if is_learnable(entry, gen)]
