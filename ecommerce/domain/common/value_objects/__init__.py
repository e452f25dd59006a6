from .ids import MAX_ENTITY_ID, UserId

__all__ = ["MAX_ENTITY_ID", "UserId"]
