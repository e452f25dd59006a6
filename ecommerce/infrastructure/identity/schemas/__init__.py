from .user_schemas import UserResponse

__all__ = ["UserResponse"]
