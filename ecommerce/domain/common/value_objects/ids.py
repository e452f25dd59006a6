from dataclasses import dataclass

from ..entity import EntityId

# Largest value a BIGINT primary key can hold
MAX_ENTITY_ID = 2**63 - 1


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: int

    @staticmethod
    def in_range(value: int) -> bool:
        """Whether value can identify a stored row."""
        return 0 < value <= MAX_ENTITY_ID
