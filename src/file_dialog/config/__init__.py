"""
Configuration management for the file dialog.
"""

from .settings import (
    ANCHORS,
    DialogLabels,
    DialogSettings,
    load_dialog_settings,
)

__all__ = [
    'ANCHORS',
    'DialogLabels',
    'DialogSettings',
    'load_dialog_settings',
]
