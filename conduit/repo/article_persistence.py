"""
Article persistence — the relational write path for articles and tags.

``ArticleStore.create`` runs inside one transaction: the article row,
the lookup of its generated id and every tag row commit together or
not at all.  Failures are returned as ``Err(Unexpected)`` instead of
being raised; only cancellation propagates, and the session context
rolls the transaction back on the way out.
"""
import logging
from datetime import datetime
from typing import Iterable, NewType

from sqlalchemy import exists, insert, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from conduit.errors import Unexpected
from conduit.models import Article, tags as tags_table
from conduit.result import Either, Err, Ok
from conduit.slug import Slug

logger = logging.getLogger(__name__)

UserId = NewType("UserId", int)
ArticleId = NewType("ArticleId", int)


def _article_id_query(values: dict):
    # Every inserted column takes part so the lookup matches this row only.
    return select(Article.id).where(
        Article.slug == values["slug"],
        Article.title == values["title"],
        Article.description == values["description"],
        Article.body == values["body"],
        Article.author_id == values["author_id"],
        Article.created_at == values["created_at"],
        Article.updated_at == values["updated_at"],
    )


class ArticleStore:
    """Creates articles with their tags and checks slug usage."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(
        self,
        author_id: UserId,
        slug: Slug,
        title: str,
        description: str,
        body: str,
        created_at: datetime,
        updated_at: datetime,
        tags: Iterable[str],
    ) -> Either[Unexpected, ArticleId]:
        """
        Insert a new article and one ``tags`` row per distinct tag.

        Slug uniqueness is the caller's concern (see ``exists``); a
        duplicate slug still fails on the unique constraint and comes
        back as ``Unexpected`` like any other storage failure.
        """
        tag_set = set(tags)
        values = {
            "slug": slug.value,
            "title": title,
            "description": description,
            "body": body,
            "author_id": author_id,
            "created_at": created_at,
            "updated_at": updated_at,
        }
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await session.execute(insert(Article).values(**values))

                    # Raises NoResultFound if the insert cannot be seen again.
                    result = await session.execute(_article_id_query(values))
                    article_id = result.scalar_one()

                    for tag in tag_set:
                        await session.execute(
                            insert(tags_table).values(article_id=article_id, tag=tag)
                        )
        except Exception as exc:
            error = Unexpected(
                f"Failed to create article: {author_id}:{title}:{sorted(tag_set)}", exc
            )
            logger.warning("%s", error, exc_info=exc)
            return Err(error)

        logger.info("Created article id=%s slug=%r with %d tag(s)", article_id, slug.value, len(tag_set))
        return Ok(ArticleId(article_id))

    async def exists(self, slug: Slug) -> Either[Unexpected, bool]:
        """Return whether an article with *slug* is stored."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(exists().where(Article.slug == slug.value))
                )
                found = bool(result.scalar_one())
        except Exception as exc:
            error = Unexpected(f"Failed to check existence of {slug}", exc)
            logger.warning("%s", error, exc_info=exc)
            return Err(error)
        return Ok(found)
