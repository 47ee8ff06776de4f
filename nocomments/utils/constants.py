"""Centralized constants for the nocomments utils package."""

from pathlib import Path

# ============================================================================
# OUTPUT DIRECTORIES
# ============================================================================

STATE_DIR = Path("./.nocomments")

ERROR_LOG_FILE = STATE_DIR / "error.log"

# ============================================================================
# CONFIGURATION FILES
# ============================================================================

CONFIG_FILE_NAMES = (".nocomments.yml", ".nocomments.yaml")

# ============================================================================
# SOURCE DISCOVERY
# ============================================================================

DEFAULT_EXTENSIONS = (
    ".cs",
    ".java",
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    ".go",
    ".c",
    ".h",
    ".cpp",
    ".hpp",
    ".kt",
    ".swift",
    ".rs",
    ".scala",
    ".dart",
)

SKIP_DIRS = frozenset(
    {".git", ".hg", ".svn", "node_modules", "bin", "obj", "dist", "build", ".nocomments", ".venv"}
)

# Maximum file size to analyze (default: 2MB)
DEFAULT_MAX_FILE_SIZE = 2 * 1024 * 1024

# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================

ENV_PREFIX = "NOCOMMENTS_"
