"""
Error normalization.

Every failure a request can run into ends up as a ``NormalizedError``: a
human-readable message plus an HTTP status. Failures arrive either as
tagged ``Failure`` values from validators and repositories, or as raised
exceptions that ``classify_exception`` turns into one.
"""
# Standard library imports
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Tuple

# External package imports
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError, OperationFailure

# Local application imports
from ..domain.result import Failure, FailureKind, ValidationIssue

DUPLICATE_KEY_CODE = 11000

DUPLICATED_KEY_MESSAGE = "Duplicated key."
INTERNAL_ERROR_MESSAGE = "Internal server error."

# Prefixes FastAPI adds to request validation locations
_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}

_TYPE_MESSAGES = {
    "missing": "Required",
    "json_invalid": "Invalid JSON",
}

_FIELD_TYPE_MESSAGES = {
    ("email", "value_error"): "Invalid email",
}

_EXPECTED_TYPES = {
    "string_type": "string",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
}


@dataclass(frozen=True)
class NormalizedError:
    """Uniform error shape returned to clients"""
    message: str
    status: int


def normalize_error(failure: Failure) -> NormalizedError:
    """
    Map a classified failure to its message and status.
    
    Validation issues are rendered as ``path: message`` segments, joined with
    ``"; "`` and terminated with ``"."``. Duplicate keys and everything else
    get fixed messages so no internal detail reaches the client.
    """
    if failure.kind is FailureKind.VALIDATION:
        return NormalizedError(message=format_issues(failure.issues), status=400)
    if failure.kind is FailureKind.DUPLICATE_KEY:
        return NormalizedError(message=DUPLICATED_KEY_MESSAGE, status=400)
    return NormalizedError(message=INTERNAL_ERROR_MESSAGE, status=500)


def format_issues(issues: Iterable[ValidationIssue]) -> str:
    segments = []
    for issue in issues:
        if issue.path:
            segments.append(f"{', '.join(issue.path)}: {issue.message}")
        else:
            segments.append(issue.message)
    if not segments:
        return ""
    return "; ".join(segments) + "."


def classify_exception(error: BaseException) -> Failure:
    """
    Turn a raised exception into a tagged failure.
    
    Order matters: validation errors first, then duplicate keys, and
    anything unrecognized falls through to UNCLASSIFIED.
    """
    if isinstance(error, (ValidationError, RequestValidationError)):
        return Failure.validation(issues_from_errors(error.errors()))
    if isinstance(error, DuplicateKeyError):
        return Failure.duplicate_key(detail=str(error))
    if isinstance(error, OperationFailure) and error.code == DUPLICATE_KEY_CODE:
        return Failure.duplicate_key(detail=str(error))
    return Failure.unclassified(detail=f"{type(error).__name__}: {error}")


def issues_from_errors(errors: Iterable[Mapping[str, Any]]) -> List[ValidationIssue]:
    """Convert pydantic error dicts into validation issues, preserving order"""
    return [
        ValidationIssue(path=_issue_path(error), message=_issue_message(error))
        for error in errors
    ]


def _issue_path(error: Mapping[str, Any]) -> Tuple[str, ...]:
    location = list(error.get("loc", ()))
    if location and location[0] in _REQUEST_LOCATIONS:
        location = location[1:]
    if error.get("type") == "json_invalid":
        # Remaining items are character offsets, not field names
        return ()
    return tuple(str(part) for part in location)


def _issue_message(error: Mapping[str, Any]) -> str:
    error_type = error.get("type", "")
    path = _issue_path(error)
    field = path[-1] if path else ""
    
    if (field, error_type) in _FIELD_TYPE_MESSAGES:
        return _FIELD_TYPE_MESSAGES[(field, error_type)]
    if error_type in _TYPE_MESSAGES:
        return _TYPE_MESSAGES[error_type]
    if error_type in _EXPECTED_TYPES:
        received = describe_type(error.get("input"))
        return f"Expected {_EXPECTED_TYPES[error_type]}, received {received}"
    return str(error.get("msg", "Invalid value"))


def describe_type(value: Any) -> str:
    """Name of a JSON value's type as clients see it"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    return "object"
