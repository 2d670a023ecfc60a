"""
Pydantic DTOs validating user-supplied custom model tables.

Shape::

    {provider: {alias: {"name": wire_name, "cost": {"in": float, "out": float}}}}
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..models import ModelCost, ModelEntry


class ModelCostDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    in_: float = Field(default=0.0, ge=0.0, alias="in")
    out: float = Field(default=0.0, ge=0.0)


class ModelEntryDTO(BaseModel):
    """One custom model entry; ``cost`` defaults to free."""

    name: str = Field(..., min_length=1)
    cost: ModelCostDTO = Field(default_factory=ModelCostDTO)

    def to_entry(self, alias: str) -> ModelEntry:
        return ModelEntry(
            alias=alias,
            wire_name=self.name,
            cost=ModelCost(in_per_million=self.cost.in_, out_per_million=self.cost.out),
        )


__all__ = ["ModelCostDTO", "ModelEntryDTO"]
