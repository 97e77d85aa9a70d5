from typing import Any


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    default_code = 'ERROR'

    def __init__(
        self,
        message: str,
        status_code: int,
        code: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.code = code or self.default_code
        self.errors = errors or []
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {'detail': self.message, 'code': self.code, 'errors': self.errors}


class ValidationError(CustomBaseError):
    """Input rejected before any write; `errors` holds one {field, message, code} per bad field"""

    default_code = 'VALIDATION_ERROR'

    def __init__(
        self,
        message: str,
        code: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message, 400, code, errors)

    @classmethod
    def for_field(cls, field: str, message: str, code: str) -> 'ValidationError':
        return cls(message, code, [{'field': field, 'message': message, 'code': code}])


class NotFoundError(CustomBaseError):
    default_code = 'NOT_FOUND'

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message, 404, code)


class ConflictError(CustomBaseError):
    default_code = 'CONFLICT'

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message, 409, code)


class InternalError(CustomBaseError):
    default_code = 'INTERNAL_ERROR'

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message, 500, code)
