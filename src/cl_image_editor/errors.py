"""Exception taxonomy for cl_image_editor."""

from pathlib import Path
from typing_extensions import override


class ImageEditorError(Exception):
    """Base class for every error raised by the image editor."""

    def __init__(self, message: str = "An unknown image editor error occurred."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"{type(self).__name__}: {self.message}"


class MissingDependency(ImageEditorError):
    """Pillow was built without the codec a format needs."""


class UnsupportedFormat(ImageEditorError):
    """The sniffed file type has no FormatSpec."""


class InvalidState(ImageEditorError):
    """The editor holds no valid buffer (closed, or never loaded)."""


class _PathError(ImageEditorError):
    def __init__(self, message: str, path: str | Path):
        self.path: Path = Path(path)
        super().__init__(message)


class LoadFailure(_PathError):
    """Decoding produced no buffer."""


class SaveFailure(_PathError):
    """Encoding or writing the output file failed."""
