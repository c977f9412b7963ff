from enum import Enum
from pydantic import BaseModel, Field


class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


class Position(BaseModel):
    line: int
    column: int


class Range(BaseModel):
    start: Position
    end: Position


class Location(BaseModel):
    path: str
    range: Range


class Code(BaseModel):
    value: str
    url: str = ""


class Diagnostic(BaseModel):
    message: str
    location: Location
    severity: Severity
    code: Code
    original: str | None = None  # snippet the finding refers to
    suggestion: str | None = None


class NormalizedResult(BaseModel):
    overview: str
    diagnostics: list[Diagnostic] = Field(default_factory=list)


class Source(BaseModel):
    name: str
    url: str = ""


class ReviewResponse(BaseModel):
    """Response envelope in reviewdog diagnostic format."""
    source: Source
    diagnostics: list[Diagnostic]
    overview: str | None = None
