"""
Logging utilities for the file dialog.
Provides error logging with timestamps and traceback support.
"""

import os
import sys
from datetime import datetime
from typing import Optional

# Module-level log file path; None logs to the console only
_log_file: Optional[str] = None


def get_log_file() -> Optional[str]:
    """Get the current log file path."""
    return _log_file


def set_log_file(path: Optional[str]) -> None:
    """
    Send error reports to ``path``. None reverts to console output.

    Args:
        path: Log file path or None
    """
    global _log_file
    _log_file = path


def update_log_file_path(work_dir: str) -> None:
    """
    Log to ``error.log`` inside ``work_dir``, creating the directory.

    Args:
        work_dir: The work directory path
    """
    os.makedirs(work_dir, exist_ok=True)
    set_log_file(os.path.join(work_dir, "error.log"))


def _format_entry(
    level: str,
    message: str,
    error_type: Optional[str] = None,
    traceback_str: Optional[str] = None,
) -> str:
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    log_message = f"[{timestamp}] {level}: {message}\n"

    if error_type:
        log_message += f"Type: {error_type}\n"

    if traceback_str:
        log_message += f"Traceback:\n{traceback_str}\n"

    log_message += "-" * 80 + "\n"
    return log_message


def _write(log_message: str) -> None:
    if _log_file is None:
        print(log_message, end="", file=sys.stderr)
        return

    try:
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(log_message)
    except OSError as e:
        # If logging fails, print to console as fallback
        print(f"Failed to write to log file: {e}", file=sys.stderr)
        print(log_message, end="", file=sys.stderr)


def log_error(
    error_msg: str,
    error_type: Optional[str] = None,
    traceback_str: Optional[str] = None,
) -> None:
    """
    Log an error message.

    Args:
        error_msg: The error message to log
        error_type: Optional error type/class name
        traceback_str: Optional traceback string
    """
    _write(_format_entry("ERROR", error_msg, error_type, traceback_str))


def log_info(message: str) -> None:
    """Log an informational message."""
    _write(_format_entry("INFO", message))


def init_log_file() -> bool:
    """
    Initialize the log file with system information.

    Returns:
        True if successful, False otherwise
    """
    if _log_file is None:
        return False

    try:
        log_dir = os.path.dirname(_log_file) or "."
        os.makedirs(log_dir, exist_ok=True)

        with open(_log_file, "w", encoding="utf-8") as f:
            f.write(
                f"Error Log - Started at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n"
            )
            f.write(f"Python version: {sys.version}\n")
            f.write(f"Platform: {sys.platform}\n")
            f.write("-" * 80 + "\n")

        print(f"Log file initialized: {_log_file}")
        return True

    except OSError as e:
        print(f"Failed to initialize log file: {e}")
        return False
