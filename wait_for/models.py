from __future__ import annotations

from datetime import timedelta
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ColorMode = Literal["auto", "always", "never"]


class HostPortTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["tcp"] = "tcp"
    host: str = Field(..., min_length=1)
    port: int = Field(..., ge=0, le=65535)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


class UrlTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["http"] = "http"
    url: str

    def __str__(self) -> str:
        return self.url


Target = HostPortTarget | UrlTarget


class WaitConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    target: Target = Field(..., discriminator="kind")
    timeout_s: int = Field(15, ge=0)
    quiet: bool = False
    color: ColorMode = "auto"
    command: List[str] = Field(default_factory=list)

    @property
    def timeout(self) -> Optional[timedelta]:
        """Overall wait budget, or None when waiting forever."""
        if self.timeout_s == 0:
            return None
        return timedelta(seconds=self.timeout_s)
