# timeconductor/config/conductor_config.py
from __future__ import annotations

from pydantic import BaseModel, Field


class ConductorConfig(BaseModel):
    """
    ConductorConfig

    Semantics:
      - which mode the session starts in ("fixed" / "realtime" / "replay")
      - which time system the conductor starts with
      - default backward window of the reference UTC time system
    """

    mode: str = "fixed"
    time_system: str = "utc"

    # 15 minutes
    window_ms: int = Field(900_000, ge=0)
