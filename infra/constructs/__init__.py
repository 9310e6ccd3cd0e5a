from .api import Api
from .auth import Auth
from .database import Database
from .functions import Functions
from .layers import Layers

__all__ = ["Api", "Auth", "Database", "Functions", "Layers"]
