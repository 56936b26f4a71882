"""Environment-variable-based configuration for the analytics report CLI."""

from __future__ import annotations

import os
from pathlib import Path

HISTORY_PATH: Path = Path(
    os.environ.get("FITNESS_HISTORY_PATH", "data/history_export.json")
).expanduser()
USER_ID: str = os.environ.get("FITNESS_USER_ID", "")
HEATMAP_MEASURE: str = os.environ.get("FITNESS_HEATMAP_MEASURE", "workouts")
LOG_LEVEL: str = os.environ.get("FITNESS_LOG_LEVEL", "INFO").upper()
