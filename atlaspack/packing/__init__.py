"""
Rectangle packing core.

Geometry value types plus the shelf-style atlas builder.
"""
from .geometry import Size, Rect
from .builder import Atlas, AtlasBuilder, DiagnosticSink

__all__ = [
    'Size',
    'Rect',
    'Atlas',
    'AtlasBuilder',
    'DiagnosticSink',
]
