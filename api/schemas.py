"""Pydantic schemas for API request/response validation."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class DemoRunRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    channel: Optional[str] = Field(None, min_length=1, max_length=32)
    region: Optional[str] = Field(None, min_length=1, max_length=32)

    def inputs(self) -> dict[str, str]:
        return {k: v for k, v in self.model_dump().items() if v is not None}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class DemoRunResponse(BaseModel):
    pattern: str
    variant: str
    title: str
    inputs: dict[str, str] = Field(default_factory=dict)
    transcript: list[str] = Field(default_factory=list)
