# File: app/repositories/errors.py

"""
Errors raised by the repository layer.

Handlers in app.core.errors turn these into HTTP responses.
"""


class RepositoryError(Exception):
    """Base class for repository failures."""


class NotFoundError(RepositoryError):
    def __init__(self, id: int):
        super().__init__(f"NotFound, id is {id}")
        self.id = id


class UnexpectedError(RepositoryError):
    def __init__(self, message: str):
        super().__init__(f"Unexpected error: {message}")
        self.message = message


class DuplicateError(RepositoryError):
    def __init__(self, id: int):
        super().__init__(f"Duplicate ID error: {id}")
        self.id = id
