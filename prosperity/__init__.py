"""
Data side of the civilization prosperity chart.

Provides:
    - load_dataset (CSV -> validated rows + warnings)
    - build_dataset (rows -> render-ready records)
    - build_scales / compute_layout
    - build_scene (records + scales + interaction state -> ChartScene)
"""

from .config import CFG
from .loader import DataLoadError, DataParseError, DatasetError, load_dataset
from .normalizer import build_dataset
from .scales import build_scales, compute_layout
from .scene import build_scene

__all__ = [
    "CFG",
    "DataLoadError",
    "DataParseError",
    "DatasetError",
    "load_dataset",
    "build_dataset",
    "build_scales",
    "compute_layout",
    "build_scene",
]
