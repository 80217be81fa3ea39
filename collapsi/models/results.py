from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from .enums import ErrorKind, ReasonCode, kind_of

T = TypeVar("T")


class Failure(BaseModel):
    code: ReasonCode
    kind: ErrorKind
    message: str
    step: int | None = None  # path index that failed, when it applies


class Result(BaseModel, Generic[T]):
    """Outcome of a rules check: either a value or a tagged failure."""

    ok: bool
    value: T | None = None
    failure: Failure | None = None

    @classmethod
    def success(cls, value: Any = None) -> Result[Any]:
        return cls(ok=True, value=value)

    @classmethod
    def fail(
        cls, code: ReasonCode, message: str, *, step: int | None = None
    ) -> Result[Any]:
        return cls(
            ok=False,
            failure=Failure(code=code, kind=kind_of(code), message=message, step=step),
        )

    @property
    def code(self) -> ReasonCode | None:
        return self.failure.code if self.failure else None

    @property
    def message(self) -> str:
        return self.failure.message if self.failure else "ok"

    def forward(self) -> Result[Any]:
        """Re-wrap a failure so it can be returned from a differently typed check."""
        return Result(ok=False, failure=self.failure)
