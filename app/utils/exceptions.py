"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns
so services and utilities can raise them without specifying status codes.

Usage:
    from app.utils.exceptions import InvalidPageRequestError
    raise InvalidPageRequestError("Page size must be greater than zero")
"""

from fastapi import HTTPException, status


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches.

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InvalidPageRequestError(BadRequestError):
    """잘못된 페이지 요청 — 음수 페이지, 0 이하 크기, 알 수 없는 정렬 키.

    Invalid pagination input: negative page index, non-positive or oversized
    page size, malformed sort expression or unknown sort property.
    Raised before any query is issued.
    """

    def __init__(self, detail: str = "Invalid page request") -> None:
        super().__init__(detail=detail)
