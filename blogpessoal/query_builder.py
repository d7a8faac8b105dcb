"""
Simple QueryBuilder for building SELECT queries.
The goal is to produce SQL queries without execution.
"""

from typing import Any

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value is matched literally"""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class QueryBuilder:
    """
    Simple query builder for SELECT statements.

    Usage:
        builder = QueryBuilder("tb_postagens")
        query, params = builder.where("id", postagem_id).build()
    """

    def __init__(self, table_name: str):
        self.table_name = table_name
        self.where_conditions: list[str] = []
        self.params: list[Any] = []
        self.order_by_parts: list[str] = []
        self.limit_count: int | None = None

    def _clone(self) -> "QueryBuilder":
        """Create a copy of the current QueryBuilder instance"""
        new_builder = QueryBuilder(self.table_name)
        new_builder.where_conditions = self.where_conditions.copy()
        new_builder.params = self.params.copy()
        new_builder.order_by_parts = self.order_by_parts.copy()
        new_builder.limit_count = self.limit_count
        return new_builder

    def _add_condition(self, field: str, value: Any, operator: str) -> "QueryBuilder":
        """Add a condition to the WHERE clause"""
        new_builder = self._clone()

        # None compares with IS NULL / IS NOT NULL
        if value is None and operator == "=":
            condition = f"{field} IS NULL"
        elif value is None and operator in ("!=", "<>"):
            condition = f"{field} IS NOT NULL"
        else:
            param_index = len(new_builder.params) + 1
            condition = f"{field} {operator} ${param_index}"
            new_builder.params.append(value)

        new_builder.where_conditions.append(condition)
        return new_builder

    def where(self, field: str, *args: Any) -> "QueryBuilder":
        """Add a WHERE condition.

        Supports both of the following call styles:
        - where(field, value) -> operator defaults to '='
        - where(field, operator, value) -> explicit operator in the second place
        """
        field = str(field)
        if len(args) == 2:
            operator, value = args
            return self._add_condition(field, value, operator)
        if len(args) == 1:
            return self._add_condition(field, args[0], "=")
        raise TypeError("where() expects (field, value) or (field, operator, value)")

    def where_contains(self, field: str, value: str) -> "QueryBuilder":
        """Case-insensitive substring match (ILIKE '%value%')"""
        return self._add_condition(str(field), f"%{escape_like(value)}%", "ILIKE")

    def where_any(self, field: str, values: list[Any]) -> "QueryBuilder":
        """Match any of `values` with a single array parameter (= ANY($n))"""
        new_builder = self._clone()
        param_index = len(new_builder.params) + 1
        new_builder.where_conditions.append(f"{field} = ANY(${param_index})")
        new_builder.params.append(list(values))
        return new_builder

    def order_by(self, field: str) -> "QueryBuilder":
        """Add ORDER BY ascending for a field. Chain to add multiple fields."""
        new_builder = self._clone()
        new_builder.order_by_parts.append(f"{field}")
        return new_builder

    def limit(self, count: int) -> "QueryBuilder":
        """Set the LIMIT clause"""
        new_builder = self._clone()
        new_builder.limit_count = count
        return new_builder

    def build_where(self) -> str:
        """Build only the WHERE clause (with a leading space) or an empty string"""
        if not self.where_conditions:
            return ""
        return f" WHERE {' AND '.join(self.where_conditions)}"

    def build(self) -> tuple[str, list[Any]]:
        """Build the final SQL query and parameters"""
        query = f"SELECT * FROM {self.table_name}{self.build_where()}"

        if self.order_by_parts:
            query += f" ORDER BY {', '.join(self.order_by_parts)}"

        if self.limit_count is not None:
            query += f" LIMIT {self.limit_count}"

        return query, self.params
