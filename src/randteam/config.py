"""Global configuration for the randteam project."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None


@dataclass
class ApiConfig:
    """Configuration for the remote data service."""

    base_url: str = field(
        default_factory=lambda: os.getenv("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2")
    )
    timeout: Optional[float] = field(default_factory=lambda: _env_float("POKEAPI_TIMEOUT"))
    pool_size: int = 32  # keep-alive connections kept per host


@dataclass
class GeneratorConfig:
    """Configuration for team assembly."""

    team_size: int = 6
    sample_size: int = 40  # candidates fetched in detail at most
    batch_size: int = 10  # parallel detail fetches per round
    max_moves: int = 4
    min_ability_generation: int = 3  # abilities were introduced in gen 3
    default_evs: Dict[str, int] = field(
        default_factory=lambda: {"Atk": 252, "Spe": 252, "HP": 4}
    )
    default_nature: str = "Adamant"
    placeholder_item: str = "[Item]"


@dataclass
class ExportConfig:
    """Configuration for the exported team file."""

    filename: str = "pokemon_team.txt"
    output_dir: str = field(default_factory=lambda: os.getenv("RANDTEAM_EXPORT_DIR", "."))

    @property
    def path(self) -> Path:
        return Path(self.output_dir) / self.filename


@dataclass
class Config:
    """Global configuration container."""

    api: ApiConfig = field(default_factory=ApiConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


# Global config instance
config = Config()
