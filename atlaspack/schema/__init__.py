"""Input and output file schemas."""
from .config import ImageDefinition, TextureList
from .atlas_map import AtlasMap, RectModel, SizeModel

__all__ = [
    "ImageDefinition",
    "TextureList",
    "AtlasMap",
    "RectModel",
    "SizeModel",
]
