"""Database seeder: creates the schema and fills it with demo articles."""
import asyncio
import argparse
import logging
import random
import time

from conduit.config import settings
from conduit.database import engine, async_session, get_article_store, Base
from conduit.models import User
from conduit.repo.article_persistence import UserId
from conduit.schemas import NewArticle
from conduit.services import article_service

TAGS = ["python", "rust", "go", "postgresql", "sql", "publishing", "writing",
        "editing", "markdown", "seo", "design", "testing", "performance",
        "security", "open-source", "tutorial"]


async def seed(small: bool = False, reset: bool = False):
    num_users = 5 if small else 25
    num_articles = 50 if small else 1000

    print(f"Seeding: {num_users} users, {num_articles} articles")
    start = time.perf_counter()

    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        users = []
        for i in range(num_users):
            user = User(
                username=f"user_{i:04d}",
                email=f"user_{i:04d}@example.com",
                bio=f"I am test user number {i}. I write about technology.",
            )
            session.add(user)
            users.append(user)
        await session.commit()
        print(f"  Created {len(users)} users")

    store = get_article_store()
    created = failed = 0
    for i in range(num_articles):
        topic = random.choice(TAGS)
        data = NewArticle(
            # Repeated titles exercise the slug suffixing.
            title=f"How to optimize {topic} applications",
            description=f"A guide to optimizing {topic} applications for production.",
            body=f"This is the full content of article {i}. " * 20,
            tags=set(random.sample(TAGS, k=random.randint(0, 4))),
        )
        result = await article_service.create_article(
            store, UserId(random.choice(users).id), data
        )
        if result.is_ok():
            created += 1
        else:
            failed += 1
            print(f"  Article {i} failed: {result.error}")

    await engine.dispose()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")
    print(f"  Users: {num_users}")
    print(f"  Articles: {created} created, {failed} failed")


def main():
    parser = argparse.ArgumentParser(description="Seed the conduit database")
    parser.add_argument("--small", action="store_true", help="Use small dataset (50 articles)")
    parser.add_argument("--reset", action="store_true", help="Drop all tables first")
    args = parser.parse_args()
    logging.basicConfig(level=settings.LOG_LEVEL)
    asyncio.run(seed(small=args.small, reset=args.reset))


if __name__ == "__main__":
    main()
