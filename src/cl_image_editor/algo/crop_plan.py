"""Cover-fit crop-and-scale planning (pure computation)."""

import math
from typing import ClassVar

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, model_validator


class CropPlan(BaseModel):
    """Draw the src_w x src_h region at (src_x, src_y) of the source, scaled
    into the dest_w x dest_h region at (dest_x, dest_y) of the destination."""

    dest_x: int = Field(default=0, ge=0)
    dest_y: int = Field(default=0, ge=0)
    src_x: int = Field(ge=0)
    src_y: int = Field(ge=0)
    dest_w: int = Field(ge=0)
    dest_h: int = Field(ge=0)
    src_w: int = Field(ge=0)
    src_h: int = Field(ge=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_full_canvas(self) -> "CropPlan":
        if self.dest_x or self.dest_y:
            raise ValueError("Destination offset must be (0, 0)")
        return self

    @property
    def source_box(self) -> tuple[int, int, int, int]:
        """Source region as a Pillow (left, upper, right, lower) box."""
        return (self.src_x, self.src_y, self.src_x + self.src_w, self.src_y + self.src_h)

    @property
    def dest_size(self) -> tuple[int, int]:
        return (self.dest_w, self.dest_h)

    def as_tuple(self) -> tuple[int, int, int, int, int, int, int, int]:
        return (
            self.dest_x,
            self.dest_y,
            self.src_x,
            self.src_y,
            self.dest_w,
            self.dest_h,
            self.src_w,
            self.src_h,
        )


def _round(value: float) -> int:
    # half away from zero; inputs here are never negative
    return math.floor(value + 0.5)


def derive_height(src_w: int, src_h: int, width: int) -> int:
    """Height that keeps the src_w:src_h aspect ratio at `width`."""
    return max(1, _round(width * src_h / src_w))


def compute_crop_plan(src_w: int, src_h: int, dest_w: int, dest_h: int) -> CropPlan | None:
    """
    Compute the cover-fit plan that fills a dest_w x dest_h box.

    A zero target dimension is derived from the source aspect ratio.

    Args:
        src_w: Source width (> 0)
        src_h: Source height (> 0)
        dest_w: Target width (>= 0)
        dest_h: Target height (>= 0)

    Returns:
        The CropPlan, or None when the source is smaller than the target in
        both dimensions and must be left unchanged

    Raises:
        ValueError: If a dimension is out of range
    """
    if src_w <= 0 or src_h <= 0:
        raise ValueError(f"Source dimensions must be positive, got {src_w}x{src_h}")
    if dest_w < 0 or dest_h < 0 or (dest_w == 0 and dest_h == 0):
        raise ValueError(f"Invalid target dimensions {dest_w}x{dest_h}")

    if src_w < dest_w and src_h < dest_h:
        logger.debug(f"No resize needed: {src_w}x{src_h} fits inside {dest_w}x{dest_h}")
        return None

    aspect_ratio = src_w / src_h
    new_w = min(dest_w, src_w)
    new_h = min(dest_h, src_h)

    if not new_w:
        new_w = max(1, _round(new_h * aspect_ratio))
    if not new_h:
        new_h = max(1, _round(new_w / aspect_ratio))

    size_ratio = max(new_w / src_w, new_h / src_h)

    crop_w = _round(new_w / size_ratio)
    crop_h = _round(new_h / size_ratio)

    src_x = (src_w - crop_w) // 2
    src_y = (src_h - crop_h) // 2

    # Differences of 1px come from rounding and are ignored
    if new_w == dest_w - 1:
        new_w = dest_w
    if new_h == dest_h - 1:
        new_h = dest_h

    plan = CropPlan(
        src_x=src_x,
        src_y=src_y,
        dest_w=new_w,
        dest_h=new_h,
        src_w=crop_w,
        src_h=crop_h,
    )
    logger.debug(f"Crop plan for {src_w}x{src_h} -> {dest_w}x{dest_h}: {plan.as_tuple()}")
    return plan
