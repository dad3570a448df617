# Repository package.
#
# Modules here own the SQL for a single aggregate and return
# ``conduit.result.Either`` values instead of raising:
#
#   article_persistence  — ArticleStore: create (article + tags), exists (slug)
#
# Each store is built from an ``async_sessionmaker`` and opens its own
# session per call, so the store controls its transaction boundary.
