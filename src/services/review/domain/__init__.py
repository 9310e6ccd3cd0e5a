from .entity import Review
from .repository import ReviewRepository
from .value_object import Comment, Rating, ReviewId

__all__ = ["Comment", "Rating", "Review", "ReviewId", "ReviewRepository"]
