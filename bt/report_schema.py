"""
JSON report models for the CLI.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BlockCheck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    source: str
    ok: bool
    error: Optional[str] = None
    error_type: Optional[str] = Field(default=None, alias="errorType")
    dangling_fields: int = Field(default=0, alias="danglingFields")


class CheckReport(BaseModel):
    ok: bool
    blocks: List[BlockCheck] = Field(default_factory=list)


class PlanReport(BaseModel):
    plans: List[Dict[str, Any]] = Field(default_factory=list)


class NamesReport(BaseModel):
    names: List[str] = Field(default_factory=list)


__all__ = ["BlockCheck", "CheckReport", "PlanReport", "NamesReport"]
