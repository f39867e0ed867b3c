"""Team generation and formatting."""
from .models import Team, TeamMember
from .builder import TeamAssembler, TeamOptions
from .export import write_export

__all__ = [
    "Team",
    "TeamMember",
    "TeamAssembler",
    "TeamOptions",
    "write_export",
]
