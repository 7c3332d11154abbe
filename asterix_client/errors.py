"""Error kinds and the result type returned across the network boundary.

Remote calls never raise to their callers. They return either `Ok(value)` or
`Err(error)`, where `error` is one of the AsterixError subclasses below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar, Union

T = TypeVar("T")


class AsterixError(RuntimeError):
    """Base class for every failure the client reports."""


class NetworkFailure(AsterixError):
    """The remote call did not complete (connect error, timeout, HTTP error)."""


class ShapeMismatch(AsterixError):
    """A response body failed validation against its expected model."""

    def __init__(self, model: str, errors: list[dict[str, Any]]) -> None:
        self.model = model
        self.errors = errors
        super().__init__(f"{model} payload failed validation ({len(errors)} error(s))")


class NotFound(AsterixError):
    """An id lookup against the current store failed."""

    def __init__(self, kind: str, entity_id: str) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} {entity_id!r} not found")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Err:
    error: AsterixError
    ok: ClassVar[bool] = False


Result = Union[Ok[T], Err]
