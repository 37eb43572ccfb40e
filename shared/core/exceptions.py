from typing import List, Optional
from dataclasses import dataclass

from shared.utils.app_status_code import AppStatusCode


@dataclass(frozen=True)
class Violation:
    field: str
    rule: str
    message: str


class AppError(Exception):
    """Base for every error the inventory service reports to its callers."""

    http_status: int = 500
    status_code: str = AppStatusCode.OPERATION_FAILED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """A required-field, length, range or format rule is violated."""

    http_status = 400
    status_code = AppStatusCode.REQUIRED_VALIDATION_ERROR

    def __init__(self, violations: List[Violation]):
        self.violations = list(violations)
        message = self.violations[0].message if self.violations else "Validation failed"
        super().__init__(message)

    @property
    def field(self) -> Optional[str]:
        return self.violations[0].field if self.violations else None


class InvalidArgumentError(AppError):
    http_status = 400
    status_code = AppStatusCode.INVALID_INPUT


class NotFoundError(AppError):
    http_status = 404
    status_code = AppStatusCode.NOT_FOUND

    def __init__(self, entity: str, key):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found with id: {key}")


class DuplicateKeyError(AppError):
    http_status = 409
    status_code = AppStatusCode.DUPLICATE_ADD_ERROR

    def __init__(self, entity: str, field: str, value):
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"{entity} with {field} '{value}' already exists")


class ConflictError(AppError):
    """A delete is blocked by products still referencing the entity."""

    http_status = 409
    status_code = AppStatusCode.DELETE_BLOCKED_BY_DEPENDENTS


class StoreFailureError(AppError):
    http_status = 500
    status_code = AppStatusCode.STORE_UNAVAILABLE
