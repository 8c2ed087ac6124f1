"""Custom exceptions for citestyle.

Formatting itself never raises; these cover loading references from
untyped sources such as JSON files.
"""


class CitestyleError(Exception):
    """Base exception for citestyle errors."""

    pass


class ReferenceLoadError(CitestyleError):
    """Raised when reference data cannot be read or does not match the schema."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not load references from {source}: {reason}")
