"""FileReview persistence backends."""

from lintbot.stores.base import FileReviewStore
from lintbot.stores.mysql import MySQLFileReviewStore

__all__ = ["FileReviewStore", "MySQLFileReviewStore"]
