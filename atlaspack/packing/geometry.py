"""
Integer geometry for atlas packing.

COORDINATE SYSTEM:
- Origin at the top-left corner of the canvas
- +X = right, +Y = down
- All values are whole pixels and never negative

A Rect plays two roles:
- Free space: a region of the canvas that is still available
- Placement: where a specific image ended up
"""

from dataclasses import dataclass
from typing import Optional, Tuple


def _check_unsigned(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class Size:
    """Width/height pair. Zero-sized sizes are legal."""
    width: int
    height: int

    def __post_init__(self):
        _check_unsigned(width=self.width, height=self.height)

    @classmethod
    def zero(cls) -> "Size":
        return cls(0, 0)

    @property
    def area(self) -> int:
        return self.width * self.height

    def fits_in(self, other: "Size") -> bool:
        """True if this size fits inside `other` (identical sizes fit)."""
        return self.width <= other.width and self.height <= other.height

    def max(self, other: "Size") -> "Size":
        """Component-wise maximum, used to fold bounding boxes."""
        return Size(max(self.width, other.width), max(self.height, other.height))


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner."""
    left: int
    top: int
    width: int
    height: int

    def __post_init__(self):
        _check_unsigned(left=self.left, top=self.top, width=self.width, height=self.height)

    @classmethod
    def from_size(cls, left: int, top: int, size: Size) -> "Rect":
        return cls(left, top, size.width, size.height)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def area(self) -> int:
        return self.width * self.height

    def bound_corner(self) -> Size:
        """Bottom-right extent of the rectangle."""
        return Size(self.left + self.width, self.top + self.height)

    def insert_and_split(self, size: Size) -> Optional[Tuple["Rect", "Rect", Optional["Rect"]]]:
        """
        Carve `size` out of this rect's top-left corner.

        The remaining free area replaces this rect in the free-space list. In
        the general case the unused width next to the placed image is returned
        as a separate leftover rect:

            +--------+           +--------+
            |        |           | p | l  |
            |        |   +---+   +---+----+
            |  self  | + | p | = |        |
            |        |   +---+   |  rest  |
            |        |           |        |
            +--------+           +--------+

        Args:
            size: Requested size

        Returns:
            None if `size` does not fit, otherwise a tuple of
            - placed: rect at the top-left corner with dimensions `size`
            - rest: what is left of this rect
            - leftover: side strip to the right of `placed`, or None
        """
        if not size.fits_in(self.size):
            return None

        placed = Rect.from_size(self.left, self.top, size)
        # Strip below the placed row, full width
        below = Rect(self.left, self.top + size.height, self.width, self.height - size.height)

        if size.width == self.width:
            return placed, below, None

        if size.height == self.height:
            # Full height: keep the strip to the right
            right = Rect(self.left + size.width, self.top, self.width - size.width, self.height)
            return placed, right, None

        leftover = Rect(self.left + size.width, self.top, self.width - size.width, size.height)
        return placed, below, leftover

    def overlaps(self, other: "Rect") -> bool:
        """True if the interiors of the two rects intersect."""
        if self.area == 0 or other.area == 0:
            return False
        return (
            self.left < other.left + other.width
            and other.left < self.left + self.width
            and self.top < other.top + other.height
            and other.top < self.top + self.height
        )
