from .equalize import equalize_window, remap, class_mapping
from .histogram import auto_window, build_cumulative, class_count, window_histogram
from .errors import (
    HistoEnhanceError,
    InvalidRangeError,
    InvalidWindowError,
    PixelCountError,
    ImageFormatError,
    RawFormatError,
)

__all__ = [
    "equalize_window",
    "remap",
    "class_mapping",
    "auto_window",
    "build_cumulative",
    "class_count",
    "window_histogram",
    "HistoEnhanceError",
    "InvalidRangeError",
    "InvalidWindowError",
    "PixelCountError",
    "ImageFormatError",
    "RawFormatError",
]
