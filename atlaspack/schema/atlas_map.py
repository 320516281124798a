"""
Atlas map: the JSON file renderers read to look up sprite coordinates.

FORMAT:

    {
        "textures": {
            "ui/button.png": {"left": 0, "top": 0, "width": 33, "height": 17}
        },
        "size": {"width": 33, "height": 17}
    }

Field names are a stable contract with downstream consumers.
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field

from atlaspack.packing import Atlas, Rect, Size


class SizeModel(BaseModel):
    model_config = ConfigDict(extra='forbid')

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)


class RectModel(BaseModel):
    """Placement rect with its size flattened next to the position."""
    model_config = ConfigDict(extra='forbid')

    left: int = Field(..., ge=0)
    top: int = Field(..., ge=0)
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)


class AtlasMap(BaseModel):
    model_config = ConfigDict(extra='forbid')

    textures: Dict[str, RectModel] = Field(default_factory=dict, description="Identifier -> placement rect.")
    size: SizeModel = Field(..., description="Bounding size of the atlas image.")

    @classmethod
    def from_atlas(cls, atlas: Atlas) -> AtlasMap:
        return cls(
            textures={
                name: RectModel(left=r.left, top=r.top, width=r.width, height=r.height)
                for name, r in atlas.textures.items()
            },
            size=SizeModel(width=atlas.size.width, height=atlas.size.height),
        )

    def to_atlas(self) -> Atlas:
        return Atlas(
            textures={
                name: Rect(r.left, r.top, r.width, r.height)
                for name, r in self.textures.items()
            },
            size=Size(self.size.width, self.size.height),
        )

    def save(self, path: Union[str, Path]) -> None:
        with open(path, 'w') as f:
            f.write(self.model_dump_json(indent=2))

    @classmethod
    def load(cls, path: Union[str, Path]) -> AtlasMap:
        with open(path, 'r') as f:
            return cls.model_validate_json(f.read())
