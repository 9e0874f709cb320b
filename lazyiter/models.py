"""
Configuration models for the configurable adapters.

Validation failures surface as ``pydantic.ValidationError``, which is a
``ValueError`` subclass, so callers only need to catch ``ValueError``.
"""

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Number = Union[int, float]


class Equality(str, Enum):
    """Comparison modes for deduplication"""
    STRICT = "strict"
    LOOSE = "loose"


class ChunkConfig(BaseModel):
    """Batch size for chunking; anything below 1 is clamped to 1"""
    size: int = Field(1, description="Number of elements per batch")

    @field_validator("size")
    @classmethod
    def clamp_size(cls, v):
        return max(1, v)


class WindowConfig(BaseModel):
    """Sliding window size"""
    size: int = Field(..., ge=1, description="Number of elements per window")


class UniqueConfig(BaseModel):
    """Equality mode used to decide whether a value was already seen"""
    equality: Equality = Field(Equality.STRICT, description="strict compares type and value, loose only value")

    @property
    def strict(self) -> bool:
        return self.equality is Equality.STRICT


class RepeatConfig(BaseModel):
    """Bounded window over an endlessly repeated source"""
    limit: int = Field(..., ge=0, description="Number of elements emitted in total")
    offset: int = Field(0, ge=0, description="Elements skipped before the window starts")


class RangeConfig(BaseModel):
    """Arithmetic sequence bounds; direction is inferred from start and end"""
    model_config = ConfigDict(frozen=True)

    start: Number = Field(..., description="First value produced")
    end: Number = Field(..., description="Inclusive bound")
    step: Number = Field(1, description="Positive distance between values")

    @field_validator("step")
    @classmethod
    def validate_step(cls, v):
        if v <= 0:
            raise ValueError("Step must be a positive integer or float")
        return v

    @model_validator(mode="after")
    def validate_span(self):
        if self.step > abs(self.end - self.start):
            raise ValueError("Step cannot be greater than the absolute difference between start and end")
        return self

    @property
    def descending(self) -> bool:
        return self.start > self.end
