"""
Shredder Constants and Configuration

Central location for the version string, buffer sizes and the user-facing
texts. There is no configuration file; everything tunable lives here.
"""

# ============================================================================
# VERSION
# ============================================================================

__version__ = "1.0.0"

PROGRAM_NAME = "shredder"
AUTHOR = "mxrcode (https://github.com/mxrcode/)"

# ============================================================================
# I/O
# ============================================================================

# Zero-fill writes happen in chunks of this size; the final chunk is partial.
BUFFER_SIZE = 4096  # 4 KB

ZERO_BYTE = b"\x00"

# ============================================================================
# PROMPTS
# ============================================================================

YES_CHOICES = ("y", "Y")
NO_CHOICES = ("n", "N")

CONFIRM_FILL_PROMPT = "Do you want to fill this file with zeros? (Y/n): "
CONFIRM_DELETE_PROMPT = "Do you want to delete this file after filling it with zeros? (Y/n): "
INVALID_CHOICE_MESSAGE = "Invalid choice. Please enter 'y' or 'n'."
WAIT_ENTER_PROMPT = "Press Enter to exit..."

# ============================================================================
# HELP TEXT
# ============================================================================

DRAG_AND_DROP_HINT = (
    "Drag and drop the file(s) onto the program icon to overwrite them with zeros."
)
