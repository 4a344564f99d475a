from __future__ import annotations

from typing import Any, Mapping, Sequence


class AppError(Exception):
    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFound(AppError):
    code = "not_found"
    status_code = 404


class ValidationError(AppError):
    code = "validation_error"
    status_code = 422


class ReproductiveRuleViolation(ValidationError):
    """A registration was rejected by the reproductive rules.

    ``details`` always carries the full ``errors`` and ``warnings`` lists.
    """

    code = "reproductive_rule_violation"

    def __init__(self, errors: Sequence[str], warnings: Sequence[str] = ()) -> None:
        super().__init__(
            "; ".join(errors) or "Reproductive rules not satisfied",
            details={"errors": list(errors), "warnings": list(warnings)},
        )
        self.errors = list(errors)
        self.warnings = list(warnings)


class DataInvalidError(AppError):
    code = "data_invalid"
    status_code = 400


class ImmutableRecordError(DataInvalidError):
    code = "immutable_record"
    status_code = 409


class ConflictError(AppError):
    code = "conflict"
    status_code = 409


class HasDependentsError(ConflictError):
    code = "has_dependents"

    def __init__(self, message: str, *, dependent: str) -> None:
        super().__init__(message, details={"dependent": dependent})
        self.dependent = dependent


class InfrastructureError(AppError):
    code = "infrastructure_error"
    status_code = 500
