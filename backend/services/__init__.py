"""Services module - Business logic layer"""

from .alignment import build_diff
from .config_manager import ConfigManager
from .diff_generator import DiffGenerator
from .lcs import compute_lcs
from .report_renderer import ReportRenderer

__all__ = [
    "compute_lcs",
    "build_diff",
    "ConfigManager",
    "DiffGenerator",
    "ReportRenderer",
]
