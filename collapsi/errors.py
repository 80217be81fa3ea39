from __future__ import annotations

from .models.enums import ErrorKind, ReasonCode, kind_of


class CollapsiError(Exception):
    def __init__(self, code: ReasonCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def kind(self) -> ErrorKind:
        return kind_of(self.code)


class InputError(CollapsiError):
    pass


class RuleViolation(CollapsiError):
    pass


class StateInconsistency(CollapsiError):
    """Raised when a mutation failed halfway and the game can no longer be trusted."""
