"""
Texture list: the declarative input of an atlas build.

FORMAT (JSON):

    {
        "width": 512,
        "height": 512,
        "images": [
            "ui/button.png",
            {"path": "tiles/grass.png", "repeat": true}
        ]
    }

- Each image is either a bare path or an object with `path` and optional `repeat`
- Paths are relative to the base directory given at build time
- The path, exactly as written, is the image identifier in the output map
- `width`/`height` are the maximum canvas size; the atlas is cropped to its content
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from atlaspack.exceptions import ConfigError


class ImageDefinition(BaseModel):
    model_config = ConfigDict(extra='forbid')

    path: str = Field(..., min_length=1, description="Image path relative to the base directory.")
    repeat: bool = Field(False, description="Marks a tiling texture. Parsed for compatibility; packing ignores it.")


class TextureList(BaseModel):
    """Validated texture list file."""
    model_config = ConfigDict(extra='forbid')

    width: int = Field(..., ge=0, description="Maximum atlas width in pixels.")
    height: int = Field(..., ge=0, description="Maximum atlas height in pixels.")
    images: List[ImageDefinition] = Field(..., min_length=1, description="Images to pack, as paths or definitions.")

    @field_validator('images', mode='before')
    @classmethod
    def normalize_images(cls, v):
        """Accept bare path strings alongside full definitions."""
        if not isinstance(v, list):
            return v
        return [{'path': item} if isinstance(item, str) else item for item in v]

    @classmethod
    def load(cls, path: Union[str, Path]) -> TextureList:
        """
        Read and validate a texture list file.

        Raises:
            ConfigError: If the file is missing, not JSON, or fails validation
        """
        path = Path(path)
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise ConfigError(f"Texture list not found: {path}")
        except json.JSONDecodeError as e:
            raise ConfigError(f"Texture list {path} is not valid JSON: {e}")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid texture list {path}:\n{e}")
