"""Template lookup with partial fallback, and kida rendering glue."""

from perch.templating.lookup import (
    FoundTemplate,
    LookupDetails,
    PartialFallbackResolver,
    TemplatePathResolver,
    TemplateSearch,
)

__all__ = [
    "FoundTemplate",
    "LookupDetails",
    "PartialFallbackResolver",
    "TemplatePathResolver",
    "TemplateSearch",
]
