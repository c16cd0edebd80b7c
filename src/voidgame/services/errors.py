"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""


class UnknownMonsterError(FactoryError):
    """Raised when a monster id is not present in the catalog."""

    def __init__(self, monster_id: int) -> None:
        super().__init__(f"Invalid MonsterID: {monster_id}")
        self.monster_id = monster_id
