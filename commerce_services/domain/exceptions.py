from typing import Dict, Optional


class DomainError(Exception):
    pass


class ValidationError(DomainError):
    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.errors = errors or {}


class InvalidSortFieldError(ValidationError):
    def __init__(self, field: str, allowed: list[str]):
        super().__init__(
            f"Invalid sort field '{field}'",
            {"sortBy": f"Must be one of: {', '.join(allowed)}"},
        )
        self.field = field


class InvalidPaginationError(ValidationError):
    pass


class NotFoundError(DomainError):
    pass


class ConflictError(DomainError):
    pass


class RepositoryError(DomainError):
    pass
