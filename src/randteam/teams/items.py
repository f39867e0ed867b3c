"""Held item pools per generation."""
import logging
import random
from typing import Dict, Optional, Tuple

from randteam.errors import NoItemAvailableError

logger = logging.getLogger(__name__)

EVIOLITE = "Eviolite"

# Items first available in each generation. Held items arrived in gen 2.
_ITEMS_ADDED: Dict[int, Tuple[str, ...]] = {
    2: (
        "Leftovers", "Quick Claw", "King's Rock", "Focus Band", "Scope Lens",
        "Light Ball", "Thick Club", "Metal Powder", "Charcoal", "Mystic Water",
        "Magnet", "Miracle Seed", "Never-Melt Ice", "Soft Sand", "Sharp Beak",
        "Hard Stone", "Spell Tag", "Dragon Fang", "Black Belt", "Black Glasses",
        "Metal Coat", "Twisted Spoon", "Poison Barb", "Silver Powder",
        "Berry", "Gold Berry", "Miracle Berry", "Mint Berry",
    ),
    3: (
        "Choice Band", "Lum Berry", "Sitrus Berry", "Chesto Berry", "Salac Berry",
        "Liechi Berry", "Petaya Berry", "White Herb", "Shell Bell", "Lax Incense",
        "Bright Powder", "Silk Scarf",
    ),
    4: (
        "Choice Scarf", "Choice Specs", "Life Orb", "Focus Sash", "Expert Belt",
        "Black Sludge", "Toxic Orb", "Flame Orb", "Light Clay", "Power Herb",
        "Razor Claw", "Wide Lens", "Muscle Band", "Wise Glasses", "Zoom Lens",
        "Damp Rock", "Heat Rock", "Smooth Rock", "Icy Rock", "Iron Ball",
        "Lagging Tail", "Sticky Barb", "Shuca Berry", "Yache Berry", "Occa Berry",
    ),
    5: (
        EVIOLITE, "Rocky Helmet", "Air Balloon", "Red Card", "Eject Button",
        "Absorb Bulb", "Cell Battery", "Binding Band", "Float Stone",
    ),
    6: ("Assault Vest", "Weakness Policy", "Safety Goggles", "Kee Berry", "Maranga Berry"),
    7: ("Protective Pads", "Terrain Extender", "Electric Seed", "Psychic Seed"),
    8: (
        "Heavy-Duty Boots", "Blunder Policy", "Throat Spray", "Eject Pack",
        "Room Service", "Utility Umbrella",
    ),
    9: (
        "Booster Energy", "Covert Cloak", "Loaded Dice", "Clear Amulet",
        "Mirror Herb", "Punching Glove", "Ability Shield",
    ),
}

# Gen 2 berries were renamed in gen 3
_ITEMS_RETIRED: Dict[int, Tuple[str, ...]] = {
    3: ("Berry", "Gold Berry", "Miracle Berry", "Mint Berry"),
}


def _build_pools() -> Dict[int, Tuple[str, ...]]:
    pools = {}
    current: list = []
    for gen in range(1, 10):
        retired = _ITEMS_RETIRED.get(gen, ())
        current = [i for i in current if i not in retired]
        current.extend(_ITEMS_ADDED.get(gen, ()))
        pools[gen] = tuple(current)
    return pools


ITEM_POOL_BY_GEN = _build_pools()


def item_pool(gen: int) -> Tuple[str, ...]:
    """Held items legal in a generation; empty when there are none."""
    return ITEM_POOL_BY_GEN.get(gen, ())


def random_item(
    is_fully_evolved: bool,
    can_evolve: bool,
    gen: int,
    rng: Optional[random.Random] = None,
) -> Optional[str]:
    """Draw a random held item, or None if the generation has none.

    Eviolite is only offered to species that can still evolve.
    """
    items = item_pool(gen)
    if not (can_evolve and not is_fully_evolved):
        items = tuple(i for i in items if i != EVIOLITE)

    if not items:
        logger.debug(f"No item pool for gen {gen}")
        return None
    return (rng or random).choice(items)


def require_item(
    is_fully_evolved: bool,
    can_evolve: bool,
    gen: int,
    rng: Optional[random.Random] = None,
) -> str:
    """Like `random_item`, but raise when nothing can be drawn."""
    item = random_item(is_fully_evolved, can_evolve, gen, rng)
    if item is None:
        raise NoItemAvailableError(gen)
    return item
