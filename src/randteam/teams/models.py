"""Data models for generated teams."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .randomizer import format_evs


def capitalize(s: str) -> str:
    """Upper-case the first character, leaving the rest unchanged."""
    return s[:1].upper() + s[1:]


@dataclass
class TeamMember:
    """A single Pokemon on a generated team."""
    name: str
    moves: List[str] = field(default_factory=list)
    ability: str = ""
    evs: Dict[str, int] = field(default_factory=dict)
    nature: str = ""
    item: Optional[str] = None
    level: int = 100

    @property
    def ev_spread(self) -> str:
        return format_evs(self.evs)

    def to_showdown(self) -> str:
        """Convert to Showdown import format."""
        name_line = self.name
        if self.item:
            name_line += f" @ {self.item}"

        lines = [
            name_line,
            f"Ability: {capitalize(self.ability)}",
            f"Level: {self.level}",
            f"EVs: {self.ev_spread}",
            f"Nature: {self.nature}",
        ]
        lines.extend(f"- {capitalize(move)}" for move in self.moves)
        return "\n".join(lines)

    def to_display(self, index: int) -> str:
        """Human-readable summary, numbered from 1."""
        return "\n".join([
            f"{index}. {self.name}",
            f"Item: {self.item if self.item else '(none)'}",
            f"Ability: {self.ability}",
            f"EVs: {self.ev_spread}",
            f"Nature: {self.nature}",
            f"Moves: {', '.join(self.moves)}",
        ])


@dataclass
class Team:
    """A complete generated team."""
    members: List[TeamMember]
    generation: int

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self):
        return iter(self.members)

    def to_showdown(self) -> str:
        """Convert team to Showdown import format."""
        return "\n\n".join(m.to_showdown() for m in self.members)

    def to_display(self) -> str:
        return "\n\n".join(m.to_display(i) for i, m in enumerate(self.members, start=1))
