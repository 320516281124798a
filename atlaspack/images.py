"""
Pillow helpers for loading source images and compositing the atlas.
"""

import logging
from pathlib import Path
from typing import Dict, Union

from PIL import Image, UnidentifiedImageError

from atlaspack.exceptions import CompositeError, ImageLoadError
from atlaspack.packing import Rect, Size

logger = logging.getLogger(__name__)


def load_image(path: Union[str, Path]) -> Image.Image:
    """
    Open and fully decode an image.

    Raises:
        ImageLoadError: If the file is missing or not a readable image
    """
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy() if img.mode == 'RGBA' else img.convert('RGBA')
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
        logger.error(f"Failed to process image {str(path)!r}: {e}")
        raise ImageLoadError(f"Failed to process image {path}: {e}") from e


def copy_into(source: Image.Image, target: Image.Image, rect: Rect) -> None:
    """
    Paste `source` into `target` at `rect`.

    The rect must lie inside the target and match the source dimensions
    exactly; anything else means the layout and the images disagree.
    """
    if rect.left + rect.width > target.width or rect.top + rect.height > target.height:
        raise CompositeError(
            f"Rect {rect} exceeds atlas buffer {target.width}x{target.height}"
        )
    if (rect.width, rect.height) != source.size:
        raise CompositeError(
            f"Rect {rect.width}x{rect.height} does not match image {source.width}x{source.height}"
        )
    if source.mode != 'RGBA':
        source = source.convert('RGBA')
    # Plain paste (no mask) copies alpha verbatim instead of blending
    target.paste(source, (rect.left, rect.top))


def composite_atlas(
    images: Dict[str, Image.Image],
    textures: Dict[str, Rect],
    size: Size,
    border: int = 0
) -> Image.Image:
    """
    Draw every image at its packed position on a transparent canvas.

    Args:
        images: identifier -> decoded image
        textures: identifier -> packed rect (including border)
        size: Atlas canvas size
        border: Padding that was added to each image before packing

    Returns:
        RGBA image of exactly `size`
    """
    atlas = Image.new('RGBA', (size.width, size.height), (0, 0, 0, 0))
    for name, image in images.items():
        if name not in textures:
            raise CompositeError(f"Image {name!r} has no associated space!")
        packed = textures[name]
        rect = Rect(packed.left, packed.top, packed.width - border, packed.height - border)
        copy_into(image, atlas, rect)
    return atlas
