"""Shared types for batch pipelines."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class BatchResult:
    """Results from a batch run."""

    total_found: int = 0
    processed: list[Path] = field(default_factory=list)
    failed: list[dict[str, Any]] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
