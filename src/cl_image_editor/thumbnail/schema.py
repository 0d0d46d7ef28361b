"""Cover thumbnail parameters schema."""

from collections.abc import Sequence

from pydantic import BaseModel, Field, field_validator, model_validator

from ..settings import EditorSettings


class CoverThumbnailParams(BaseModel):
    """Parameters for a batch of cover-fit thumbnails.

    Attributes:
        input_paths: Paths to the source images
        output_paths: Paths for the thumbnails, one per input
        width: Target width in pixels
        height: Target height in pixels (None = keep the source aspect ratio)
        settings: Resampling and encoder settings
    """

    input_paths: list[str] = Field(
        default_factory=list,
        description="List of absolute paths to input images",
    )
    output_paths: list[str] = Field(
        default_factory=list,
        description="List of absolute paths for output thumbnails",
    )
    width: int = Field(..., gt=0, description="Target width in pixels")
    height: int | None = Field(default=None, gt=0, description="Target height in pixels")
    settings: EditorSettings = Field(default_factory=EditorSettings)

    @field_validator("output_paths")
    @classmethod
    def validate_output_paths_unique(cls, v: Sequence[str]) -> Sequence[str]:
        """Ensure output paths are unique."""
        if len(v) != len(set(v)):
            raise ValueError("Output paths must be unique")
        return v

    @model_validator(mode="after")
    def validate_paths_length(self) -> "CoverThumbnailParams":
        """Ensure output paths match input paths count."""
        if len(self.output_paths) != len(self.input_paths):
            raise ValueError("Number of output paths must match number of input paths")
        return self
