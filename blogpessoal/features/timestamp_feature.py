"""Timestamp feature for automatic timestamp management"""

from datetime import UTC, datetime
from typing import Any

from blogpessoal.features.base_feature import RepositoryFeature


class UpdateTimestampFeature(RepositoryFeature):
    """
    Stamps a timestamp column with the current UTC time on every insert and
    update. Whatever value the entity carried for that column is replaced.

    Usage:
        config = RepositoryConfig(features=[UpdateTimestampFeature("data")])
    """

    def __init__(self, column: str = "updated_at"):
        self.column = column

    @staticmethod
    def _get_current_timestamp() -> datetime:
        """Get current UTC timestamp as a datetime object"""
        return datetime.now(UTC)

    def before_create(self, data: dict[str, Any]) -> dict[str, Any]:
        data[self.column] = self._get_current_timestamp()
        return data

    def before_update(self, data: dict[str, Any]) -> dict[str, Any]:
        data[self.column] = self._get_current_timestamp()
        return data
