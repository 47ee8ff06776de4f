"""nocomments utilities package."""

from .constants import (
    CONFIG_FILE_NAMES,
    DEFAULT_EXTENSIONS,
    DEFAULT_MAX_FILE_SIZE,
    ERROR_LOG_FILE,
    STATE_DIR,
)
from .error_handler import handle_exceptions
from .exit_codes import ExitCodes
from .helpers import discover_source_files, normalize_relpath, save_json_file
from .logging import logger

__all__ = [
    "CONFIG_FILE_NAMES",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_MAX_FILE_SIZE",
    "ERROR_LOG_FILE",
    "STATE_DIR",
    "handle_exceptions",
    "ExitCodes",
    "discover_source_files",
    "normalize_relpath",
    "save_json_file",
    "logger",
]
