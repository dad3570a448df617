"""
Slugs — URL-safe article identifiers.

``slugify`` turns a title into a candidate slug, ``Slug`` validates one,
and ``generate_slug`` finds a candidate that no other article uses yet.
Uniqueness is checked through a caller-supplied ``verify_unique``
callable (normally ``ArticleStore.exists`` negated) so this module stays
free of any database access.
"""
import logging
import re
import secrets
from dataclasses import dataclass
from typing import Awaitable, Callable

from conduit.config import settings
from conduit.errors import CannotGenerateSlug, IncorrectInput, Unexpected
from conduit.result import Either, Err, Ok

logger = logging.getLogger(__name__)

_SLUG_STRIP_RE = re.compile(r"[^\w\s-]")
_SLUG_SPACE_RE = re.compile(r"[\s_]+")
_SLUG_DASH_RE = re.compile(r"-+")

# Letter/digit runs joined by single dashes.
_SLUG_VALID_RE = re.compile(r"^[^\W_]+(?:-[^\W_]+)*$")


def slugify(text: str) -> str:
    """Return a URL-safe, lowercase slug derived from *text*."""
    text = _SLUG_STRIP_RE.sub("", text.lower().strip())
    text = _SLUG_SPACE_RE.sub("-", text)
    return _SLUG_DASH_RE.sub("-", text).strip("-")


@dataclass(frozen=True)
class Slug:
    value: str

    def __post_init__(self) -> None:
        if len(self.value) > settings.SLUG_MAX_LENGTH:
            raise ValueError(
                f"slug is longer than {settings.SLUG_MAX_LENGTH} characters: {self.value!r}"
            )
        if not _SLUG_VALID_RE.match(self.value):
            raise ValueError(f"not a valid slug: {self.value!r}")

    def __str__(self) -> str:
        return self.value


def _candidates(base: str, attempts: int):
    yield base
    for _ in range(attempts - 1):
        suffix = secrets.token_hex(3)
        # Leave room for the suffix under the length ceiling.
        head = base[: settings.SLUG_MAX_LENGTH - len(suffix) - 1].rstrip("-")
        yield f"{head}-{suffix}"


async def generate_slug(
    title: str,
    verify_unique: Callable[[Slug], Awaitable[Either[Unexpected, bool]]],
    max_attempts: int | None = None,
) -> Either[IncorrectInput | CannotGenerateSlug | Unexpected, Slug]:
    """
    Return the first slug derived from *title* that *verify_unique*
    accepts.

    The plain ``slugify(title)`` is tried first; later attempts append a
    random hex suffix.  Gives up with ``CannotGenerateSlug`` after
    *max_attempts* (default ``settings.SLUG_MAX_ATTEMPTS``) candidates.
    An ``Err`` from *verify_unique* is returned as-is.
    """
    attempts = max_attempts or settings.SLUG_MAX_ATTEMPTS
    base = slugify(title)[: settings.SLUG_MAX_LENGTH].strip("-")
    if not base:
        return Err(IncorrectInput((f"title cannot be turned into a slug: {title!r}",)))

    for candidate in _candidates(base, attempts):
        slug = Slug(candidate)
        unique = await verify_unique(slug)
        if unique.is_err():
            return unique
        if unique.value:
            return Ok(slug)
        logger.debug("Slug %r already taken", candidate)

    return Err(CannotGenerateSlug(f"Failed to generate unique slug from title {title!r}"))
