"""Perch exception hierarchy.

Lookups report "not found" and "not ours" as return values. Exceptions are
reserved for bad configuration and for the convenience helpers that promise
a result.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when a ``ViewsConfig`` is invalid.

    Raised from ``ViewsConfig.__post_init__``, so a bad config never exists.
    """


class TemplateNotFoundError(PerchError, LookupError):
    """No template matched a name/prefix lookup.

    Carries the lookup arguments so error pages can show what was searched.
    """

    def __init__(self, name: str, prefix: str, partial: bool) -> None:
        self.name = name
        self.prefix = prefix
        self.partial = partial
        kind = "partial" if partial else "template"
        where = f"{prefix}/{name}" if prefix else name
        super().__init__(f"Missing {kind} {where!r}")


class ViewLoadError(PerchError, ImportError):
    """A found template cannot be mapped to a module in the views namespace."""
