"""
Business exception hierarchy.

Every business failure carries a stable, machine-readable ``code`` for
client-side classification and a human-readable ``message`` for display.
Subclasses fix their code and default message; callers may override the
message only.
"""

from typing import ClassVar

from starlette import status


class BusinessError(Exception):
    """Base exception for all business errors."""

    code: ClassVar[str] = "BUSINESS_ERROR"
    default_message: ClassVar[str] = "业务处理失败"
    status_code: ClassVar[int] = status.HTTP_400_BAD_REQUEST

    def __init__(self, code: str, message: str) -> None:
        """Initialize with an explicit code and message."""
        self.code = code  # type: ignore[misc]
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, str]:
        """Serialize to the client-facing error body."""
        return {"code": self.code, "message": self.message}


class InvalidTokenError(BusinessError):
    """Authentication token is absent, malformed or expired."""

    code: ClassVar[str] = "INVALID_TOKEN"
    default_message: ClassVar[str] = "令牌无效或已过期"
    status_code: ClassVar[int] = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.code, self.default_message if message is None else message)


class ProductOutOfStockError(BusinessError):
    """Requested quantity exceeds available inventory."""

    code: ClassVar[str] = "PRODUCT_OUT_OF_STOCK"
    default_message: ClassVar[str] = "商品库存不足"
    status_code: ClassVar[int] = status.HTTP_409_CONFLICT

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.code, self.default_message if message is None else message)


class UserNotFoundError(BusinessError):
    """Referenced user identifier has no corresponding record."""

    code: ClassVar[str] = "USER_NOT_FOUND"
    default_message: ClassVar[str] = "用户不存在"
    status_code: ClassVar[int] = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.code, self.default_message if message is None else message)
