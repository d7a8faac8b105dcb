"""Repository class"""

import copy
import logging
from typing import Any

from pydantic import BaseModel, Field

from blogpessoal.database_operations import DatabaseOperations
from blogpessoal.entities import BaseEntity
from blogpessoal.entity_mapper import EntityMapper
from blogpessoal.exceptions import EntityNotFoundError
from blogpessoal.features import RepositoryFeature
from blogpessoal.query_builder import QueryBuilder

logger = logging.getLogger(__name__)


class RepositoryConfig(BaseModel):
    """Configuration options for Repository"""

    model_config = {"arbitrary_types_allowed": True}

    features: list[RepositoryFeature] = Field(
        default_factory=list, description="Hooks applied on insert and update"
    )


class Repository[T: BaseEntity]:
    """Generic CRUD over one table, keyed on an integer id assigned by the database.

    Every method must run inside DatabaseManager.transaction() (or a
    @transactional function); the connection is taken from the context.

    Fluent queries return a new repository instance:
        await repo.where("titulo", "ILIKE", "%java%").order_by("id").get()
    """

    def __init__(
        self,
        entity_class: type[T],
        table_name: str | None = None,
        config: RepositoryConfig | None = None,
    ):
        if entity_class is None:
            raise ValueError("entity_class is required")
        if table_name is None:
            raise ValueError("table_name is required")

        self.entity_class = entity_class
        self.table_name = table_name
        self.config = config or RepositoryConfig()
        self._query_builder: QueryBuilder | None = None

        # Composition: Inject dependencies
        self.db_ops = DatabaseOperations()
        self.entity_mapper = EntityMapper(entity_class)

    def _get_or_create_query_builder(self) -> QueryBuilder:
        """Get an existing query builder or create a new one"""
        if self._query_builder is None:
            return QueryBuilder(self.table_name)
        return self._query_builder

    def _clone_with_query_builder(self, query_builder: QueryBuilder) -> "Repository[T]":
        """Shallow copy of this repository (subclass preserved) with the given builder"""
        new_repo = copy.copy(self)
        new_repo._query_builder = query_builder
        return new_repo

    def _apply_features(self, data: dict[str, Any], is_create: bool) -> dict[str, Any]:
        for feature in self.config.features:
            data = feature.before_create(data) if is_create else feature.before_update(data)
        return data

    # Fluent query methods that return a new repository instance
    def where(self, field: str, *args: Any) -> "Repository[T]":
        """Add a WHERE condition.

        Supports both: where(field, value) and where(field, operator, value)
        """
        current_builder = self._get_or_create_query_builder()
        return self._clone_with_query_builder(current_builder.where(field, *args))

    def where_contains(self, field: str, value: str) -> "Repository[T]":
        """Add a case-insensitive substring condition"""
        current_builder = self._get_or_create_query_builder()
        return self._clone_with_query_builder(current_builder.where_contains(field, value))

    def where_any(self, field: str, values: list[Any]) -> "Repository[T]":
        """Add a condition matching any of the given values"""
        current_builder = self._get_or_create_query_builder()
        return self._clone_with_query_builder(current_builder.where_any(field, values))

    def order_by(self, field: str) -> "Repository[T]":
        """Add ORDER BY ascending for a field"""
        current_builder = self._get_or_create_query_builder()
        return self._clone_with_query_builder(current_builder.order_by(field))

    # Execution methods for fluent queries
    async def get(self) -> list[T]:
        """Execute the query and return all matching entities"""
        query, params = self._get_or_create_query_builder().build()
        rows = await self.db_ops.fetch_all(query, params)
        return self.entity_mapper.map_rows_to_entities(rows)

    async def first(self) -> T | None:
        """Execute the query and return the first matching entity"""
        query, params = self._get_or_create_query_builder().limit(1).build()
        row = await self.db_ops.fetch_one(query, params)
        if row:
            return self.entity_mapper.map_row_to_entity(row)
        return None

    # CRUD operations
    async def find_all(self) -> list[T]:
        """All rows, oldest id first"""
        return await self.order_by("id").get()

    async def find_by_id(self, entity_id: int) -> T | None:
        """Find entity by ID using fluent interface"""
        return await self.where("id", entity_id).first()

    async def save(self, entity: T) -> T | None:
        """Insert when the entity has no id, otherwise overwrite the matching row.

        Returns None when an id is given but no row carries it.
        """
        if entity.id is None:
            return await self.create(entity)
        return await self.update(entity)

    async def create(self, entity: T) -> T:
        """Insert a new row; the database assigns the id"""
        fields = self._apply_features(
            self.entity_mapper.map_entity_to_row(entity), is_create=True
        )

        columns = ", ".join(fields.keys())
        values = list(fields.values())
        placeholders = ", ".join([f"${i + 1}" for i in range(len(values))])

        row = await self.db_ops.fetch_one(
            f"INSERT INTO {self.table_name} ({columns}) "
            f"VALUES ({placeholders}) RETURNING *",
            values,
        )
        created = self.entity_mapper.map_row_to_entity(row)
        logger.info("Inserted %s id=%s", self.table_name, created.id)
        return created

    async def update(self, entity: T) -> T | None:
        """Overwrite every column of the row with the entity's id"""
        if entity.id is None:
            raise ValueError("update() requires an entity with an id")

        fields = self._apply_features(
            self.entity_mapper.map_entity_to_row(entity), is_create=False
        )

        set_clause = ", ".join([f"{k} = ${i + 2}" for i, k in enumerate(fields.keys())])
        values = [entity.id, *fields.values()]

        row = await self.db_ops.fetch_one(
            f"UPDATE {self.table_name} SET {set_clause} "
            f"WHERE id = $1 RETURNING *",
            values,
        )
        if row is None:
            return None
        logger.info("Updated %s id=%s", self.table_name, entity.id)
        return self.entity_mapper.map_row_to_entity(row)

    async def delete(self, entity_id: int | None = None) -> bool | int:
        """
        Delete entity by ID or delete all records matching the current query.

        - repo.delete(id) -> Delete a single entity by ID, returns bool
        - repo.where(...).delete() -> Delete all matching records, returns count
        """
        if entity_id is not None:
            result = await self.db_ops.execute_query(
                f"DELETE FROM {self.table_name} WHERE id = $1",
                [entity_id],
            )
            deleted = result != "DELETE 0"
            if deleted:
                logger.info("Deleted %s id=%s", self.table_name, entity_id)
            return deleted

        if self._query_builder is None or not self._query_builder.where_conditions:
            raise ValueError("Cannot delete without entity_id or WHERE conditions")

        result = await self.db_ops.execute_query(
            f"DELETE FROM {self.table_name}{self._query_builder.build_where()}",
            self._query_builder.params.copy(),
        )
        return int(result.split()[-1])

    async def delete_by_id(self, entity_id: int) -> None:
        """Delete the row with the given id; raises EntityNotFoundError if there is none"""
        if not await self.delete(entity_id):
            raise EntityNotFoundError(self.table_name, entity_id)
