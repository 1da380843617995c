"""
Standardized error types for the grid helpers.
"""

from typing import Optional


class GridHelpersError(Exception):
    """Base exception for all grid helper errors."""
    pass


class CollaboratorError(GridHelpersError):
    """
    Raised when a column needs a caller-supplied callable that is missing.

    Exceptions raised *by* collaborators are never wrapped in this type;
    they reach the caller unchanged.
    """

    def __init__(self, collaborator: str, column_key: Optional[str] = None,
                 message: str = None):
        self.collaborator = collaborator
        self.column_key = column_key
        self.message = message or (
            f"Column {column_key!r} requires a {collaborator!r} callable"
        )
        super().__init__(self.message)


class ValidationError(GridHelpersError):
    """Structural validation errors (e.g. unknown column kind)."""
    pass


class ConfigurationError(GridHelpersError):
    """Configuration-related errors (e.g. an unknown log level)."""
    pass
