from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- POLYLINE SAMPLING ---------------------


class SampleModel(BaseModel):
    """Random polylines for property checks; coordinates drawn inside `extent`."""

    model_config = ConfigDict(extra="forbid")
    seed: int = 123
    min_points: int = 2
    max_points: int = 12
    extent: tuple[float, float, float, float] = (0.0, 0.0, 1_000.0, 1_000.0)
    with_z: bool = False

    @field_validator("min_points", "max_points")
    @classmethod
    def _at_least_two(cls, v: int, info: ValidationInfo) -> int:
        if v < 2:
            raise ValueError(f"{info.field_name} must be >= 2")
        return v

    @model_validator(mode="after")
    def _check_ranges(self):
        if self.max_points < self.min_points:
            raise ValueError(
                f"max_points ({self.max_points}) must be >= min_points ({self.min_points})"
            )
        x0, y0, x1, y1 = self.extent
        if x1 <= x0 or y1 <= y0:
            raise ValueError("extent must be (xmin, ymin, xmax, ymax) with positive area")
        return self


# ------------------------------------------------------------------


class LinerefModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    log: LogModel = Field(default_factory=LogModel)
    sample: SampleModel = Field(default_factory=SampleModel)
