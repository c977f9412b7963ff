from .diagnostic import (
    Code,
    Diagnostic,
    Location,
    NormalizedResult,
    Position,
    Range,
    ReviewResponse,
    Severity,
    Source,
)
from .review import GitInfo, GitUser, ReviewRequest

__all__ = [
    "Code",
    "Diagnostic",
    "Location",
    "NormalizedResult",
    "Position",
    "Range",
    "ReviewResponse",
    "Severity",
    "Source",
    "GitInfo",
    "GitUser",
    "ReviewRequest",
]
