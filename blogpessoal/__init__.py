"""Blog Pessoal: posts, themes and users over asyncpg and FastAPI"""

from blogpessoal.db_context import DatabaseManager, transactional
from blogpessoal.features import RepositoryFeature, UpdateTimestampFeature
from blogpessoal.repository import Repository, RepositoryConfig

__all__ = [
    "DatabaseManager",
    "transactional",
    "Repository",
    "RepositoryConfig",
    "RepositoryFeature",
    "UpdateTimestampFeature",
]
