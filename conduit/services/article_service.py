"""
Article service — the caller-level workflow around ``ArticleStore``.

Design notes
------------
- ``ArticleStore.create`` does not check slug uniqueness; this service
  does it first by generating a slug that ``ArticleStore.exists``
  reports as free.  A concurrent writer can still take the slug between
  the check and the insert; the unique constraint then fails the
  insert and the caller receives ``Unexpected``.  No retry happens here.
- ``created_at`` and ``updated_at`` are stamped once, in UTC, so both
  are equal on a new article.
"""
import logging
from datetime import datetime, timezone

from conduit.errors import ApiError
from conduit.repo.article_persistence import ArticleStore, UserId
from conduit.result import Either
from conduit.schemas import ArticleCreated, NewArticle
from conduit.slug import Slug, generate_slug

logger = logging.getLogger(__name__)


async def create_article(
    store: ArticleStore,
    author_id: UserId,
    data: NewArticle,
    now: datetime | None = None,
) -> Either[ApiError, ArticleCreated]:
    """
    Create an article for *author_id* and return its summary.

    Returns ``Err`` with ``IncorrectInput`` when the title yields no
    slug, ``CannotGenerateSlug`` when every candidate is taken, and
    ``Unexpected`` for any storage failure.
    """

    async def _is_free(slug: Slug):
        return (await store.exists(slug)).map(lambda taken: not taken)

    slug_result = await generate_slug(data.title, _is_free)
    if slug_result.is_err():
        logger.info("Slug generation failed for author=%s: %s", author_id, slug_result.error)
        return slug_result
    slug = slug_result.value

    timestamp = now or datetime.now(timezone.utc)
    created = await store.create(
        author_id=author_id,
        slug=slug,
        title=data.title,
        description=data.description,
        body=data.body,
        created_at=timestamp,
        updated_at=timestamp,
        tags=data.tags,
    )
    return created.map(
        lambda article_id: ArticleCreated(
            id=article_id,
            slug=slug.value,
            title=data.title,
            description=data.description,
            body=data.body,
            author_id=author_id,
            tags=sorted(data.tags),
            created_at=timestamp,
            updated_at=timestamp,
        )
    )
