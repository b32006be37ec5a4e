from typing import Any, Optional

from rest_framework.response import Response

from ..services import ActionResult, FieldErrors, Message, Navigate
from ..validation import ErrorCode


class APIResponse:
    """Standardized API response format."""

    @staticmethod
    def success(
        data: Any = None,
        message: str = "Success",
        status_code: int = 200,
    ) -> Response:
        response_data = {
            "success": True,
            "message": message,
        }
        if data is not None:
            response_data["data"] = data
        return Response(response_data, status=status_code)

    @staticmethod
    def error(
        code: str,
        message: str = "An error occurred",
        details: Optional[Any] = None,
        status_code: int = 400,
    ) -> Response:
        response_data = {
            "success": False,
            "error": {
                "code": code,
                "message": message,
            },
        }
        if details:
            response_data["error"]["details"] = details
        return Response(response_data, status=status_code)

    @classmethod
    def from_action_result(cls, result: ActionResult, success_status: int = 200) -> Response:
        if isinstance(result, FieldErrors):
            return cls.error(ErrorCode.VALIDATION_ERROR.value, result.message, result.errors, 400)
        if isinstance(result, Message):
            if result.ok:
                return cls.success(message=result.message, status_code=success_status)
            return cls.error(ErrorCode.PERSISTENCE_ERROR.value, result.message, status_code=503)
        if isinstance(result, Navigate):
            return cls.success(data={"redirect": result.path}, status_code=success_status)
        raise TypeError(f"Unsupported action result: {result!r}")
