"""Exceptions raised by the persistence and authentication layers"""


class EntityNotFoundError(Exception):
    """No row matched the requested id"""

    def __init__(self, table_name: str, entity_id: int):
        self.table_name = table_name
        self.entity_id = entity_id
        super().__init__(f"No row in {table_name} with id {entity_id}")


class UsernameNotFoundError(Exception):
    """No user is registered under the given username"""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"{username} não encontrado.")
