"""
Module: builder.output.writer

Purpose:
    Write rendered images to disk as PNG.
    Writes go to a temp file in the target directory and are then moved
    into place, so an interrupted run never leaves a truncated PNG.

Key Functions:
    - write_png(): Save an image atomically

Dependencies:
    - PIL.Image: Image saving
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from PIL import Image

logger = logging.getLogger(__name__)


def write_png(image: Image.Image, path: Path, *, compress_level: int = 6) -> Path:
    """
    Save `image` to `path` as PNG, overwriting any existing file.

    No temp file is left behind when the save or the final move fails.

    Args:
        image: Image to save
        path: Destination file
        compress_level: zlib level, 0-9

    Returns:
        The destination path

    Raises:
        OSError: If the directory cannot be created, the image cannot be
            encoded, or the file cannot be moved into place
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="wb",
        suffix=".png",
        dir=path.parent,
        delete=False,
    ) as f:
        temp_path = Path(f.name)
        try:
            image.save(f, format="PNG", compress_level=compress_level)
        except OSError:
            f.close()
            temp_path.unlink(missing_ok=True)
            raise
        except ValueError as e:
            # Pillow reports some encoder failures as ValueError
            f.close()
            temp_path.unlink(missing_ok=True)
            raise OSError(f"Could not encode {path.name}: {e}") from e

    try:
        # replace() overwrites on every platform, rename() does not on Windows
        temp_path.replace(path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
    logger.debug(f"Wrote {path.name} ({image.width}x{image.height})")
    return path
