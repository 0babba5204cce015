"""
Argument validation against pydantic parameter models.

Tools declare their parameters as pydantic models. ``validate_arguments``
checks raw tool arguments against such a model and returns a tagged result
instead of raising, so tools can report bad input back to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A single problem with one field of the input."""

    path: tuple[str | int, ...]
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"path": list(self.path), "message": self.message}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """
    Outcome of validating tool arguments.

    Exactly one of ``params`` (on success) or ``issues`` (on failure) is
    meaningful, as indicated by ``valid``.
    """

    valid: bool
    params: dict[str, Any] = field(default_factory=dict)
    issues: tuple[ValidationIssue, ...] = ()

    @classmethod
    def ok(cls, params: dict[str, Any]) -> ValidationResult:
        return cls(valid=True, params=params)

    @classmethod
    def fail(cls, issues: list[ValidationIssue]) -> ValidationResult:
        return cls(valid=False, issues=tuple(issues))

    def to_error_payload(self) -> dict[str, Any]:
        """Error envelope returned to the caller when validation fails."""
        return {
            "error": "Validation error",
            "details": [issue.to_dict() for issue in self.issues],
        }


def validate_arguments(
    model: type[BaseModel],
    arguments: dict[str, Any] | None,
) -> ValidationResult:
    """
    Validate ``arguments`` against ``model``.

    On success the parameters are dumped back to plain data in field
    declaration order, using aliases and leaving out fields the caller never
    supplied. Unknown keys are dropped.

    Args:
        model: Pydantic model describing the accepted parameters
        arguments: Raw arguments from the tool call

    Returns:
        ValidationResult with either the parameters or the issues found
    """
    try:
        instance = model.model_validate(arguments or {})
    except ValidationError as e:
        return ValidationResult.fail(
            [
                ValidationIssue(path=tuple(error["loc"]), message=error["msg"])
                for error in e.errors()
            ]
        )

    return ValidationResult.ok(
        instance.model_dump(mode="json", by_alias=True, exclude_unset=True)
    )
