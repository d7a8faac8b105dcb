"""Base feature interface for repository features"""

from typing import Any


class RepositoryFeature:
    """
    Base class for repository features.

    Features hook into the repository write path to fill in columns the
    client never supplies (timestamps, audit data, ...).
    """

    def before_create(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Hook called before inserting a row.

        Args:
            data: Column values about to be inserted

        Returns:
            Modified data dictionary
        """
        return data

    def before_update(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Hook called before updating a row.

        Args:
            data: Column values about to be written

        Returns:
            Modified data dictionary
        """
        return data
