"""Random selection helpers for team attributes."""
import random
from typing import Dict, List, Optional, Sequence, TypeVar

T = TypeVar("T")

STATS = ("HP", "Atk", "Def", "SpA", "SpD", "Spe")
EV_TOTAL = 508
EV_STAT_MAX = 252
EV_STEP_MAX = 63

NATURES = (
    "Adamant", "Modest", "Jolly", "Timid", "Brave", "Calm", "Impish", "Bold",
    "Careful", "Hardy", "Hasty", "Lonely", "Mild", "Naive", "Quiet", "Rash",
    "Relaxed", "Sassy", "Serious", "Docile", "Lax", "Gentle", "Bashful",
    "Quirky", "Naughty",
)


def pick_random(items: Sequence[T], n: int, rng: Optional[random.Random] = None) -> List[T]:
    """Pick up to `n` distinct elements uniformly at random.

    Partial Fisher-Yates shuffle: after `k` swaps the first `k` slots hold a
    uniformly random k-permutation of `items`. The input is not modified.
    """
    rng = rng or random
    pool = list(items)
    limit = min(n, len(pool))
    for i in range(limit):
        j = rng.randrange(i, len(pool))
        pool[i], pool[j] = pool[j], pool[i]
    return pool[:limit]


def random_evs(rng: Optional[random.Random] = None) -> Dict[str, int]:
    """Random EV allocation summing to exactly 508 with no stat above 252."""
    rng = rng or random
    evs = {stat: 0 for stat in STATS}
    remaining = EV_TOTAL

    while remaining > 0:
        stat = rng.choice(STATS)
        add = rng.randint(0, min(remaining, EV_STEP_MAX))
        # Rejected increments are simply redrawn
        if evs[stat] + add <= EV_STAT_MAX:
            evs[stat] += add
            remaining -= add

    return evs


def format_evs(evs: Dict[str, int]) -> str:
    """Render EVs as e.g. "252 Atk / 252 Spe / 4 HP", skipping zeros."""
    return " / ".join(f"{v} {k}" for k, v in evs.items() if v > 0)
