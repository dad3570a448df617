# Services package.
#
# Each module exposes async functions that implement a caller-level
# workflow on top of the repository layer:
#
#   article_service  — slug generation + article creation
#
# Service functions take the store they work against as their first
# argument and return ``conduit.result.Either`` values.
