"""
Global constants for the file dialog.
Contains display defaults, timing constants and built-in names.
"""

# **************************************************************** #
#                       Build Info                                     #
# **************************************************************** #
APP_VERSION = "0.1.0"

# **************************************************************** #
#                       Display Settings                             #
# **************************************************************** #
FPS = 30
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

DEFAULT_DIALOG_SIZE = (640, 520)
MIN_DIALOG_SIZE = (420, 300)
SCROLLAREA_MAX_HEIGHT = 320
LIST_ITEM_HEIGHT = 32
FIELD_HEIGHT = 36
BUTTON_HEIGHT = 36

# **************************************************************** #
#                       Touch/Mouse Settings                         #
# **************************************************************** #
SCROLL_THRESHOLD = 5  # Pixels to move before a press becomes a drag
DOUBLE_CLICK_THRESHOLD = 500  # Max ms between clicks for double-click

# **************************************************************** #
#                       Dialog Behaviour                             #
# **************************************************************** #
DEFAULT_NEW_FOLDER_NAME = "New folder"
HIDDEN_PREFIX = "."
