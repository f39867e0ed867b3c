"""Writing teams to Showdown import files."""
import logging
from pathlib import Path
from typing import Optional

from randteam.config import ExportConfig
from .models import Team

logger = logging.getLogger(__name__)


def default_export_path(config: Optional[ExportConfig] = None) -> Path:
    return (config or ExportConfig()).path


def write_export(team: Team, path: Optional[Path] = None) -> Path:
    """Save a team in Showdown import format.

    Args:
        team: Team to export
        path: Target file; defaults to `pokemon_team.txt` in the export dir

    Returns:
        Path of the written file
    """
    path = Path(path) if path else default_export_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(team.to_showdown(), encoding="utf-8")
    logger.info(f"Saved team to {path}")
    return path
