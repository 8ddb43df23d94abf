from .article_repository import ArticleRepository
from .image_host import ImageHost
from .user_repository import UserRepository

__all__ = [
    "ArticleRepository",
    "ImageHost",
    "UserRepository",
]
