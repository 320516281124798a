"""
Atlas build pipeline

Loads the images named in a texture list, packs them, and writes the atlas
image plus its JSON map.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from PIL import Image

from atlaspack.exceptions import AtlasCapacityError, AtlasError
from atlaspack.images import composite_atlas, load_image
from atlaspack.packing import Atlas, AtlasBuilder, DiagnosticSink, Size
from atlaspack.schema import AtlasMap, ImageDefinition, TextureList

logger = logging.getLogger(__name__)

DEFAULT_BORDER = 1


@dataclass
class BuildConfig:
    """
    Everything needed for one atlas build.

    Attributes:
        width: Maximum atlas width
        height: Maximum atlas height
        images: Images to pack
        base_dir: Directory image paths are relative to
        output_image: Where to save the atlas image (format from extension)
        output_map: Where to save the JSON map
        border: Empty pixels reserved right of and below every image
    """
    width: int
    height: int
    images: List[ImageDefinition] = field(default_factory=list)
    base_dir: Path = field(default_factory=Path)
    output_image: Optional[Path] = None
    output_map: Optional[Path] = None
    border: int = DEFAULT_BORDER

    @classmethod
    def from_texture_list(
        cls,
        textures: TextureList,
        base_dir: Union[str, Path] = "",
        output_image: Optional[Union[str, Path]] = None,
        output_map: Optional[Union[str, Path]] = None,
        border: int = DEFAULT_BORDER
    ) -> "BuildConfig":
        return cls(
            width=textures.width,
            height=textures.height,
            images=list(textures.images),
            base_dir=Path(base_dir),
            output_image=Path(output_image) if output_image else None,
            output_map=Path(output_map) if output_map else None,
            border=border,
        )


def _load_images(config: BuildConfig) -> Tuple[Dict[str, Image.Image], List[Tuple[str, Size]]]:
    images = {}
    rects = []
    for definition in config.images:
        logger.info(f"Loading {definition.path}" + (" (repeat)" if definition.repeat else ""))
        image = load_image(config.base_dir / definition.path)
        size = Size(image.width + config.border, image.height + config.border)
        images[definition.path] = image
        rects.append((definition.path, size))
    return images, rects


def _pack(
    config: BuildConfig,
    rects: List[Tuple[str, Size]],
    diagnostics: Optional[DiagnosticSink]
) -> Atlas:
    builder = AtlasBuilder(config.width, config.height, diagnostics=diagnostics)
    if not builder.build(rects):
        raise AtlasCapacityError(config.width, config.height, builder.placed_count, len(rects))
    atlas = builder.finish()
    logger.info(
        f"Packed {len(atlas.textures)} images into {atlas.size.width}x{atlas.size.height} "
        f"(canvas {config.width}x{config.height})"
    )
    return atlas


def plan(config: BuildConfig, diagnostics: Optional[DiagnosticSink] = None) -> Atlas:
    """
    Compute the layout without writing anything.

    Raises:
        ImageLoadError: If an image cannot be opened
        AtlasCapacityError: If the images do not fit the canvas
    """
    _, rects = _load_images(config)
    return _pack(config, rects, diagnostics)


def build(config: BuildConfig, diagnostics: Optional[DiagnosticSink] = None) -> Atlas:
    """
    Build the atlas image and map.

    Args:
        config: Build configuration; output_image and output_map must be set
        diagnostics: Optional sink for packer diagnostics (defaults to logging)

    Returns:
        The packed Atlas (rects include the border)

    Raises:
        ValueError: If an output path is missing
        ImageLoadError: If an image cannot be opened
        AtlasCapacityError: If the images do not fit the canvas
        AtlasError: If the packed atlas has zero area
    """
    if config.output_image is None or config.output_map is None:
        raise ValueError("build() needs both output_image and output_map")

    images, rects = _load_images(config)
    atlas = _pack(config, rects, diagnostics)
    if atlas.size.area == 0:
        raise AtlasError(
            f"Nothing to draw: atlas of {len(rects)} images has size "
            f"{atlas.size.width}x{atlas.size.height}"
        )

    buffer = composite_atlas(images, dict(atlas.textures), atlas.size, border=config.border)
    buffer.save(config.output_image)
    logger.info(f"Saved atlas image to {config.output_image}")

    AtlasMap.from_atlas(atlas).save(config.output_map)
    logger.info(f"Saved atlas map to {config.output_map}")
    return atlas
