from .entity import Profile
from .repository import ProfileRepository

__all__ = ["Profile", "ProfileRepository"]
