# timeconductor/config/replay_config.py
from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class ReplayConfig(BaseModel):
    """
    ReplayConfig

    Range replayed by the replay tick source, epoch milliseconds.
    """

    start_ms: int = 0
    end_ms: int = 60_000
    step_ms: int = Field(1_000, gt=0)

    @model_validator(mode="after")
    def _check_range(self) -> "ReplayConfig":
        if self.end_ms < self.start_ms:
            raise ValueError(
                f"end_ms ({self.end_ms}) must be >= start_ms ({self.start_ms})"
            )
        return self
