"""
UI Modal Screens - Modal dialog page components.
"""

from .file_dialog_modal import FileDialogModal

__all__ = [
    'FileDialogModal',
]
