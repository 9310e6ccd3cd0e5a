from .comment import Comment
from .rating import Rating
from .review_id import ReviewId

__all__ = ["Comment", "Rating", "ReviewId"]
