from typing import ClassVar

from pydantic import BaseModel
from pydantic.config import ConfigDict


class Column[T]:
    """Type-safe column reference for schema classes.

    Usage:
        class PostagemSchema(SchemaBase):
            titulo = Column[str]("titulo")

    This allows for:
        repo.where(PostagemSchema.titulo, "Primeira postagem")
    """

    def __init__(self, column_name: str):
        """
        Args:
            column_name: The actual database column name
        """
        self._column_name = column_name

    @property
    def column(self) -> str:
        """Return the underlying database column name."""
        return self._column_name

    def __str__(self) -> str:
        """Return the column name when used in queries"""
        return self._column_name

    def __repr__(self) -> str:
        return f"Column({self._column_name})"


class SchemaBase:
    """Base class for table definitions with type-safe columns.

    Subclasses set `table` and declare one Column per database column.
    """

    table: ClassVar[str]


class BaseEntity(BaseModel):
    """Base entity class for all database models.

    The id is assigned by the database on insert; an entity without id has
    not been persisted yet.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")
    id: int | None = None
