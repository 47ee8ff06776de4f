"""Centralized exit codes for the nocomments CLI."""


class ExitCodes:
    """Standard exit codes for nocomments CLI commands."""

    SUCCESS = 0

    FLAGGED_COMMENTS = 1

    TASK_INCOMPLETE = 3

    @classmethod
    def get_description(cls, code: int) -> str:
        """Get human-readable description for an exit code."""
        descriptions = {
            cls.SUCCESS: "Success - No unauthorized comments found",
            cls.FLAGGED_COMMENTS: "Unauthorized comments detected",
            cls.TASK_INCOMPLETE: "Task could not be completed due to missing or unreadable inputs",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")
