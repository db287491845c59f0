from . import (
    arc_sampler,
    bias,
    bounds,
    config,
    contour,
    export_svg,
    path,
    pen_path,
    resample,
    smoothing,
    spine,
    transform,
)
from .config import ContourType, StrokeConfig
from .pen_path import PenStroke

__all__ = [
    "arc_sampler",
    "bias",
    "bounds",
    "config",
    "contour",
    "export_svg",
    "path",
    "pen_path",
    "resample",
    "smoothing",
    "spine",
    "transform",
    "ContourType",
    "StrokeConfig",
    "PenStroke",
]
