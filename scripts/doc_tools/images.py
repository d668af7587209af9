"""
Convert PNG files under a directory tree to JPEG and remove the originals.

Each .png is read, re-encoded as JPEG, written next to the source with a
.jpg extension, and then deleted. A failure on one file is logged and that
file is skipped. A directory that cannot be listed stops the whole walk.
"""

import io
import logging
import os
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd
from PIL import Image

logger = logging.getLogger(__name__)

PNG_EXTENSION = ".png"
JPEG_EXTENSION = ".jpg"
REPORT_COLUMNS = ["source", "output", "status", "error"]

# JPEG stores neither alpha nor a palette.
JPEG_MODES = {"RGB", "L"}

# Errors Pillow raises for files it cannot decode or encode. The PNG plugin
# raises SyntaxError for a corrupt chunk found while loading pixel data.
IMAGE_ERRORS = (OSError, SyntaxError, ValueError, Image.DecompressionBombError)


class TraversalError(Exception):
    """
    Raised when the root or one of its subdirectories cannot be listed.
    """


@dataclass
class ConversionResult:
    source: str
    output: Optional[str]
    status: str
    error: Optional[str] = None


def to_jpeg(image_bytes: bytes, quality: Optional[int] = None) -> bytes:
    """
    Converts PNG bytes to JPEG bytes.

    Uses the encoder's default settings unless quality is given. Raises
    PIL.UnidentifiedImageError if the bytes are not a PNG image.
    """
    with Image.open(io.BytesIO(image_bytes), formats=["PNG"]) as img:
        img.load()
        if img.mode not in JPEG_MODES:
            img = img.convert("RGB")

        buf = io.BytesIO()
        if quality is None:
            img.save(buf, "JPEG")
        else:
            img.save(buf, "JPEG", quality=quality)
    return buf.getvalue()


def jpeg_path_for(png_path):
    """
    Returns the sibling .jpg path for a .png file.
    """
    base, _ = os.path.splitext(png_path)
    return base + JPEG_EXTENSION


def _raise_traversal_error(err):
    raise TraversalError(f"Cannot list directory {err.filename}: {err.strerror}") from err


def convert_file(png_path, quality=None):
    """
    Converts one PNG file and deletes it. Never raises for per-file errors.
    Returns a ConversionResult describing what happened.
    """
    try:
        with open(png_path, "rb") as f:
            image_bytes = f.read()
    except OSError as e:
        logger.error(f"Failed to read image file {png_path}: {e}")
        return ConversionResult(png_path, None, "failed", f"read: {e}")

    try:
        jpeg_bytes = to_jpeg(image_bytes, quality)
    except IMAGE_ERRORS as e:
        logger.error(f"Failed to convert image {png_path}: {e}")
        return ConversionResult(png_path, None, "failed", f"convert: {e}")

    output_path = jpeg_path_for(png_path)
    try:
        with open(output_path, "wb") as f:
            f.write(jpeg_bytes)
    except OSError as e:
        logger.error(f"Failed to write JPEG file {output_path}: {e}")
        return ConversionResult(png_path, None, "failed", f"write: {e}")

    # The JPEG stays on disk if the delete fails.
    try:
        os.remove(png_path)
    except OSError as e:
        logger.error(f"Failed to delete PNG file {png_path}: {e}")
        return ConversionResult(png_path, output_path, "failed", f"delete: {e}")

    print(f"Image conversion successful: {output_path}")
    return ConversionResult(png_path, output_path, "converted")


def convert_png_directory(root, quality=None) -> List[ConversionResult]:
    """
    Walks root recursively and converts every file ending in exactly .png.

    Raises TraversalError if root is not a directory or a directory in the
    tree cannot be listed.
    """
    if not os.path.isdir(root):
        raise TraversalError(f"{root} is not a directory")

    results = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_traversal_error):
        dirnames.sort()
        for name in sorted(filenames):
            # Case-sensitive: .PNG files are left alone.
            if os.path.splitext(name)[1] != PNG_EXTENSION:
                continue
            path = os.path.join(dirpath, name)
            if not os.path.isfile(path):
                continue
            results.append(convert_file(path, quality))
    return results


def write_report(results, path):
    """
    Writes conversion results to CSV, or to Excel when path ends in .xlsx.
    """
    df = pd.DataFrame(
        [[r.source, r.output, r.status, r.error] for r in results],
        columns=REPORT_COLUMNS,
    )
    if str(path).lower().endswith(".xlsx"):
        df.to_excel(path, index=False, engine="openpyxl")
    else:
        df.to_csv(path, index=False)
    logger.info(f"Report written to {path}")
