from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    schedule_path: Path
    orders_path: Path
    export_path: Path | None = None
    log_level: str = "WARNING"
    show_schedule: bool = True
