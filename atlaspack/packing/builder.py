"""
Shelf-style guillotine packer.

Images are sorted by area (largest first) and placed one at a time into the
most recently created free rectangle that can hold them. Every placement cuts
a row as tall as the placed image; the unused width of that row becomes a new
free rectangle that is tried first for the next image.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .geometry import Rect, Size

logger = logging.getLogger(__name__)

# (level, message) -> None, with levels from the logging module
DiagnosticSink = Callable[[int, str], None]


def _log_diagnostic(level: int, message: str) -> None:
    logger.log(level, message)


@dataclass(frozen=True)
class Atlas:
    """
    Result of a packing run.

    Attributes:
        textures: identifier -> placement rect
        size: Tightest bounding box of all placements (not the requested canvas)
    """
    textures: Mapping[str, Rect]
    size: Size = field(default_factory=Size.zero)

    def __post_init__(self):
        object.__setattr__(self, 'textures', MappingProxyType(dict(self.textures)))


class AtlasBuilder:
    """
    Pack non-repeating images into a texture atlas of fixed maximum size.

    A builder is single use: `finish()` hands out the atlas and closes it.

    Example:
        >>> builder = AtlasBuilder(10, 10)
        >>> builder.build([("a", Size(6, 4)), ("b", Size(4, 4))])
        True
        >>> builder.finish().size
        Size(width=10, height=4)
    """

    def __init__(self, width: int, height: int, diagnostics: Optional[DiagnosticSink] = None):
        self.canvas = Size(width, height)
        self._free_spaces: List[Rect] = [Rect(0, 0, width, height)]
        self._textures: Dict[str, Rect] = {}
        self._placements = 0
        self._diagnostics = diagnostics or _log_diagnostic
        self._finished = False

    @property
    def textures(self) -> Mapping[str, Rect]:
        """Read-only view of the placements made so far."""
        return MappingProxyType(self._textures)

    @property
    def free_spaces(self) -> Tuple[Rect, ...]:
        return tuple(self._free_spaces)

    @property
    def placed_count(self) -> int:
        """Successful placements, counting repeated identifiers each time."""
        return self._placements

    def build(self, images: Iterable[Tuple[str, Size]]) -> bool:
        """
        Place every image, largest area first.

        Stops at the first image that does not fit. Images placed before that
        stay placed, but the run as a whole should be treated as failed.

        Returns:
            True if every image was placed
        """
        self._check_open()
        # sorted() is stable, so equal areas keep their input order
        data = sorted(images, key=lambda item: item[1].area, reverse=True)
        for name, size in data:
            if not self.add_rect(name, size):
                self._diagnostics(
                    logging.INFO,
                    f"Image {name!r} ({size.width}x{size.height}) does not fit in "
                    f"{self.canvas.width}x{self.canvas.height} canvas",
                )
                return False
        return True

    def add_rect(self, name: str, size: Size) -> bool:
        """Place a single image into the newest free rect that admits it."""
        self._check_open()
        for index in reversed(range(len(self._free_spaces))):
            space = self._free_spaces[index]
            if space.size == size:
                self._diagnostics(
                    logging.INFO,
                    f"Image {name!r} has same size as target rect. Results in empty space of size 0",
                )
            result = space.insert_and_split(size)
            if result is None:
                continue
            placed, rest, leftover = result
            self._free_spaces[index] = rest
            if name in self._textures:
                self._diagnostics(logging.WARNING, f"Image {name!r} inserted multiple times")
            self._textures[name] = placed
            self._placements += 1
            if leftover is not None:
                self._free_spaces.append(leftover)
            return True
        return False

    def min_bounding_rect(self) -> Size:
        bound = Size.zero()
        for rect in self._textures.values():
            bound = bound.max(rect.bound_corner())
        return bound

    def finish(self) -> Atlas:
        """Close the builder and return the packed atlas."""
        self._check_open()
        self._finished = True
        return Atlas(textures=self._textures, size=self.min_bounding_rect())

    def _check_open(self) -> None:
        if self._finished:
            raise RuntimeError("AtlasBuilder already finished")
