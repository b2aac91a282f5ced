"""Services module - Business logic layer"""

from .diff_generator import DEFAULT_MAX_LCS_CELLS, DiffGenerator, compute_word_diff, tokenize
from .config_manager import ConfigManager
from .resume_comparison import ResumeComparer, pick_default_pair, resume_label

__all__ = [
    "DEFAULT_MAX_LCS_CELLS",
    "DiffGenerator",
    "compute_word_diff",
    "tokenize",
    "ConfigManager",
    "ResumeComparer",
    "pick_default_pair",
    "resume_label",
]
