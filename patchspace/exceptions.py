"""
Custom exceptions for the application.
"""

from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class WorkspaceError(BaseAppError):
    """Exception raised for virtual workspace errors."""

    pass


class PathNotFoundError(WorkspaceError):
    """
    Raised when a path cannot be resolved to a unique workspace record.

    Ambiguous paths (several equally good candidates) are reported with this
    error too; the candidates end up in ``suggestions``.
    """

    def __init__(
        self,
        path: str,
        suggestions: Optional[list[str]] = None,
        hint: str = "",
        message: Optional[str] = None,
    ):
        self.path = path
        self.suggestions = list(suggestions or [])
        if message is None:
            message = f"File not found: {path}."
            if self.suggestions:
                message += f" Did you mean: {', '.join(self.suggestions)}?"
            elif hint:
                message += f" {hint}"
        super().__init__(message)


class InvalidPatchFormatError(WorkspaceError):
    """Raised when a search/replace block has no usable content."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "Invalid search/replace block format. Use: <<<<<<< SEARCH\\n[find]\\n=======\\n[replace]\\n>>>>>>> REPLACE"
        )


class SearchTextNotFoundError(WorkspaceError):
    """Raised when the text to replace does not occur in the target file."""

    def __init__(self, path: str, snippet: str, message: Optional[str] = None):
        self.path = path
        self.snippet = snippet
        super().__init__(message or f"Search string not found in {path}.")


class InvalidRegexPatternError(WorkspaceError):
    """Raised when a grep pattern does not compile."""

    def __init__(self, pattern: str, reason: str = ""):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid regex pattern: {pattern}")


class InvalidOperationError(WorkspaceError):
    """Raised when a tool call carries missing or malformed arguments."""

    pass
