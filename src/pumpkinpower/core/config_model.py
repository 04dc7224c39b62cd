"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PluginSettings:
    data_dir: Path
    unaltered_id: int = 86
    altered_id: int = 91
    logger_name: str = "Pumpkins"
    debug: bool = False
    data_file_name: str = "changed_blocks.txt"
    config_file_name: str = "config.yml"

    @property
    def data_file(self) -> Path:
        return self.data_dir / self.data_file_name

    @property
    def config_file(self) -> Path:
        return self.data_dir / self.config_file_name
