"""Custom exceptions for atlas building"""


class AtlasError(Exception):
    """Base exception for atlas errors"""
    pass


class ConfigError(AtlasError):
    """Texture list missing, unreadable or invalid"""
    pass


class ImageLoadError(AtlasError):
    """Source image could not be opened or decoded"""
    pass


class AtlasCapacityError(AtlasError):
    """Images do not fit into the requested canvas"""

    def __init__(self, width: int, height: int, placed: int, total: int):
        self.width = width
        self.height = height
        self.placed = placed
        self.total = total
        super().__init__(
            f"Could not fit images into atlas of size {width}x{height} "
            f"(placed {placed} of {total} images)"
        )


class CompositeError(AtlasError):
    """Placement rect and source image disagree (programming error)"""
    pass
