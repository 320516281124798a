"""
atlaspack - Pack sprites and textures into a single atlas image

Images are packed largest first into a fixed-size canvas with a shelf-style
guillotine packer. The result is an atlas image cropped to its content and a
JSON map of where every image ended up.
"""

from atlaspack.packing import Atlas, AtlasBuilder, Rect, Size
from atlaspack.pipeline import BuildConfig, build, plan

__version__ = "0.1.0"
__all__ = ["Atlas", "AtlasBuilder", "Rect", "Size", "BuildConfig", "build", "plan"]
