"""File discovery, analysis and fix application across a project."""
from .runner import FixResult, RunSummary, analyze_path, fix_path, run_check, run_fix
from .ui import console, print_header, print_success

__all__ = [
    "FixResult", "RunSummary", "analyze_path", "fix_path", "run_check", "run_fix",
    "console", "print_header", "print_success",
]
