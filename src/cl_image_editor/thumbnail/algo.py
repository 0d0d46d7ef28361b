"""Cover-fit thumbnail entry points (framework-agnostic)."""

from collections.abc import Callable
from pathlib import Path

from loguru import logger

from ..editor import ImageEditor
from ..settings import EditorSettings
from .schema import CoverThumbnailParams


def cover_thumbnail(
    *,
    input_path: str | Path,
    output_path: str | Path,
    width: int,
    height: int | None = None,
    settings: EditorSettings | None = None,
) -> str:
    """
    Cover-fit a single image into width x height and write it.

    The output keeps the input's format whatever the output suffix is.

    Args:
        input_path: Path to input image
        output_path: Path to output image
        width: Target width
        height: Target height, derived from the aspect ratio if None
        settings: Resampling and encoder settings

    Returns:
        Output file path as string

    Raises:
        FileNotFoundError: If input image does not exist
        ImageEditorError: If the image cannot be loaded, resized or saved
    """
    with ImageEditor.from_file(input_path, settings) as editor:
        _ = editor.resize(width, height).save(output_path)

    return str(output_path)


def cover_thumbnails(
    params: CoverThumbnailParams,
    progress_callback: Callable[[int], None] | None = None,
) -> list[str]:
    """Run cover_thumbnail for every input/output pair of `params`."""
    processed_files: list[str] = []
    total_files = len(params.input_paths)

    for index, (input_path, output_path) in enumerate(zip(params.input_paths, params.output_paths)):
        output = cover_thumbnail(
            input_path=input_path,
            output_path=output_path,
            width=params.width,
            height=params.height,
            settings=params.settings,
        )
        processed_files.append(output)

        if progress_callback:
            progress = int((index + 1) / total_files * 100)
            progress_callback(progress)

    logger.info(f"Created {len(processed_files)} cover thumbnails")
    return processed_files
