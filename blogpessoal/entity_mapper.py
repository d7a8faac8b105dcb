from typing import Any

from pydantic import BaseModel


class EntityMapper[T: BaseModel]:
    """Translates between database rows and typed entities"""

    def __init__(self, entity_class: type[T]):
        self.entity_class = entity_class
        self.columns = list(entity_class.model_fields)

    def map_row_to_entity(self, row: Any) -> T:
        """Map database row to entity, ignoring columns the entity does not declare"""
        data = {k: v for k, v in dict(row).items() if k in self.columns}
        return self.entity_class(**data)

    def map_rows_to_entities(self, rows: list[Any]) -> list[T]:
        """Map database rows to entities"""
        return [self.map_row_to_entity(row) for row in rows]

    def map_entity_to_row(self, entity: BaseModel) -> dict[str, Any]:
        """Column values of an entity, primary key excluded"""
        fields = entity.model_dump()
        return {k: fields[k] for k in self.columns if k != "id" and k in fields}
