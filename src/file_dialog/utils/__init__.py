"""
Utility functions for the file dialog.
"""

from .logging import (
    log_error,
    log_info,
    init_log_file,
    set_log_file,
    get_log_file,
    update_log_file_path,
)

__all__ = [
    "log_error",
    "log_info",
    "init_log_file",
    "set_log_file",
    "get_log_file",
    "update_log_file_path",
]
