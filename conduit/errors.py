from __future__ import annotations

from dataclasses import dataclass, field


class ApiError:
    """Marker base for every error kind carried inside an ``Err``."""


@dataclass(frozen=True)
class Unexpected(ApiError):
    """
    Any storage-level failure: constraint violations, lost connections,
    or a freshly inserted row that cannot be found again.

    ``description`` names the operation and the identifying fields,
    ``error`` is the original exception.
    """

    description: str
    error: BaseException | None = None

    def __str__(self) -> str:
        if self.error is None:
            return self.description
        return f"{self.description}: {self.error!r}"


@dataclass(frozen=True)
class IncorrectInput(ApiError):
    errors: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CannotGenerateSlug(ApiError):
    description: str
