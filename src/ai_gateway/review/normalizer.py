# src/ai_gateway/review/normalizer.py
"""Turn a model's raw reply into a NormalizedResult.

Models are asked for a single JSON object but routinely wrap it in markdown
fences, surround it with prose, or ignore the format entirely. ``normalize``
tries, in order:

1. a fenced code block (```` ```json ```` or bare fences) holding an object,
2. the widest span that looks like an object with ``overview`` and ``issues``,
3. the raw text itself,

and decodes the candidate. If decoding fails, a line-pattern heuristic mines
``File: x Line: n - message`` style findings out of the text instead. The
function never raises: a backend answering in prose yields fewer diagnostics,
not a failed request.
"""
import json
import logging
import re

from pydantic import BaseModel, ValidationError

from ai_gateway.models.diagnostic import (
    Code,
    Diagnostic,
    Location,
    NormalizedResult,
    Position,
    Range,
    Severity,
)


logger = logging.getLogger(__name__)

DEFAULT_OVERVIEW = "AI code review completed"
FALLBACK_CATEGORY = "ai-review"

_FENCED_JSON = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL)
_FILE_LINE = re.compile(
    r"(?:file|path):\s*([^\s]+).*?(?:line|L):\s*(\d+).*?[-:]\s*(.+?)(?:\n|$)",
    re.IGNORECASE,
)

_SEVERITY_ALIASES = {
    "ERROR": Severity.ERROR,
    "CRITICAL": Severity.ERROR,
    "HIGH": Severity.ERROR,
    "WARNING": Severity.WARNING,
    "WARN": Severity.WARNING,
    "MEDIUM": Severity.WARNING,
    "INFO": Severity.INFO,
    "INFORMATION": Severity.INFO,
    "LOW": Severity.INFO,
    "NOTE": Severity.INFO,
}


class RawIssue(BaseModel):
    file: str | None = None
    line: int | None = None
    column: int | None = None
    severity: str | None = None
    category: str | None = None
    message: str | None = None
    suggestion: str | None = None


class RawReview(BaseModel):
    overview: str | None = None
    issues: list[RawIssue] | None = None


def normalize_severity(severity: str | None) -> Severity:
    """Map any severity token onto ERROR, WARNING or INFO. Unknown tokens are INFO."""
    if not severity:
        return Severity.INFO
    return _SEVERITY_ALIASES.get(severity.strip().upper(), Severity.INFO)


def find_raw_object(text: str) -> str | None:
    """Widest span from the first "{" before "overview" to the last "}" after "issues".

    Greedy on purpose, so prose around the object that contains braces can be
    swallowed too. Runs in linear time on truncated or brace-heavy replies.
    """
    close = text.rfind("}")
    issues = text.rfind('"issues"', 0, close)
    if close < 0 or issues < 0:
        return None

    overview = text.rfind('"overview"', 0, issues)
    if overview < 0:
        return None

    start = text.find("{", 0, overview)
    if start < 0:
        return None

    return text[start:close + 1]


def extract_json(text: str) -> str:
    """Return the most likely JSON candidate inside ``text``."""
    match = _FENCED_JSON.search(text)
    if match:
        return match.group(1)

    span = find_raw_object(text)
    if span is not None:
        return span

    return text


def _make_range(line: int, column: int | None) -> Range:
    start_column = column or 1
    return Range(
        start=Position(line=line, column=start_column),
        end=Position(line=line, column=start_column + 1),
    )


def _parse_structured(candidate: str) -> RawReview | None:
    try:
        data = json.loads(candidate)
    except (ValueError, RecursionError):
        return None

    if not isinstance(data, dict):
        return None

    try:
        return RawReview.model_validate(data)
    except ValidationError:
        return None


def _from_structured(review: RawReview) -> NormalizedResult:
    diagnostics = []
    for issue in review.issues or []:
        line = issue.line or 0
        diagnostics.append(Diagnostic(
            message=issue.message or "",
            location=Location(path=issue.file or "", range=_make_range(line, issue.column)),
            severity=normalize_severity(issue.severity),
            code=Code(value=issue.category or ""),
            suggestion=issue.suggestion or None,
        ))

    return NormalizedResult(
        overview=review.overview or DEFAULT_OVERVIEW,
        diagnostics=diagnostics,
    )


def parse_unstructured(text: str) -> NormalizedResult:
    """Last-resort heuristic for replies that are not JSON.

    Only picks up findings written as ``File: path ... Line: n - message``.
    Everything found is reported as INFO since the model gave no usable
    severity.
    """
    diagnostics = []
    for match in _FILE_LINE.finditer(text):
        line = int(match.group(2))
        diagnostics.append(Diagnostic(
            message=match.group(3).strip(),
            location=Location(path=match.group(1), range=_make_range(line, 1)),
            severity=Severity.INFO,
            code=Code(value=FALLBACK_CATEGORY),
        ))

    overview = DEFAULT_OVERVIEW
    if not diagnostics:
        for line in text.split("\n"):
            line = line.strip()
            if line and not line.startswith("#"):
                overview = line
                break

    return NormalizedResult(overview=overview, diagnostics=diagnostics)


def normalize(raw_text: str) -> NormalizedResult:
    """Parse a model reply into diagnostics. Never raises."""
    text = raw_text or ""
    review = _parse_structured(extract_json(text))
    if review is None:
        logger.warning("Model reply is not valid review JSON, using text fallback")
        return parse_unstructured(text)
    return _from_structured(review)
