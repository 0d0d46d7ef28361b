"""Crop planning and resampling algorithms."""

from .crop_plan import CropPlan, compute_crop_plan, derive_height
from .resample import resample

__all__ = ["CropPlan", "compute_crop_plan", "derive_height", "resample"]
