"""
Pydantic Validated Models
=========================
Validation layer for configuration handed to the allocator.

The allocator itself never rejects input; these checks are where a caller
guarantees a complete capacity mapping and a duplicate-free location list.

Usage:
    from storerota.models.validated import ValidatedAllocatorConfig

    config = ValidatedAllocatorConfig(capacity={"Morning": 3}).to_dataclass()
"""
from typing import Dict, List, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .config import AllocatorConfig
from .rules import DEFAULT_BASE_RATE, SLOT_CAPACITY, SLOT_HOURS
from .shift import SLOT_ORDER, SlotType


class ValidatedAllocatorConfig(BaseModel):
    """
    Pydantic-validated allocator configuration.

    Use this for strict validation at input boundaries (CLI, files).
    Can be converted to/from the dataclass AllocatorConfig.
    """
    model_config = ConfigDict(validate_assignment=True)

    capacity: Dict[SlotType, int] = Field(default_factory=lambda: dict(SLOT_CAPACITY))
    slot_hours: Dict[SlotType, int] = Field(default_factory=lambda: dict(SLOT_HOURS))
    base_rate: float = Field(default=DEFAULT_BASE_RATE, ge=0, description="Hourly pay rate")

    @field_validator("capacity", "slot_hours", mode="before")
    @classmethod
    def parse_slot_keys(cls, v):
        """Accept English/Vietnamese slot labels as keys."""
        if not isinstance(v, dict):
            raise ValueError("expected a mapping of slot type to integer")
        return {SlotType.from_string(k): n for k, n in v.items()}

    @field_validator("capacity", "slot_hours")
    @classmethod
    def validate_positive(cls, v: Dict[SlotType, int]) -> Dict[SlotType, int]:
        """Every configured slot needs a positive value."""
        for slot, n in v.items():
            if n < 1:
                raise ValueError(f"{slot.value} must be at least 1, got {n}")
        return v

    @model_validator(mode="after")
    def validate_complete(self):
        """Capacity and hours must cover every slot type."""
        for name in ("capacity", "slot_hours"):
            missing = [s.value for s in SLOT_ORDER if s not in getattr(self, name)]
            if missing:
                raise ValueError(f"{name} is missing slot types: {', '.join(missing)}")
        return self

    def to_dataclass(self) -> AllocatorConfig:
        """Convert to dataclass AllocatorConfig."""
        return AllocatorConfig(
            capacity=dict(self.capacity),
            slot_hours=dict(self.slot_hours),
            base_rate=self.base_rate,
        )

    @classmethod
    def from_dataclass(cls, config: AllocatorConfig) -> "ValidatedAllocatorConfig":
        """Create from dataclass AllocatorConfig."""
        return cls(
            capacity=dict(config.capacity),
            slot_hours=dict(config.slot_hours),
            base_rate=config.base_rate,
        )


def validate_locations(locations: Sequence[str]) -> List[str]:
    """
    Check a location list before allocation.

    Raises:
        ValueError: on blank or duplicate location ids
    """
    seen = set()
    result = []
    for loc in locations:
        loc_id = str(loc).strip()
        if not loc_id:
            raise ValueError("Location ids must not be empty")
        if loc_id in seen:
            raise ValueError(f"Duplicate location id: {loc_id!r}")
        seen.add(loc_id)
        result.append(loc_id)
    return result
