from .base import Base
from .models import ArticleModel, UserModel
from .session import Database

__all__ = [
    "Base",
    "Database",
    "ArticleModel",
    "UserModel",
]
