from .review_repository import ReviewRepository

__all__ = ["ReviewRepository"]
