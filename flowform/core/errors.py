"""
Client error types for the turn orchestrator.

Every error here is caller/input fault: the model reply or an extracted value
was unusable. None of them should be retried as-is.
"""

from typing import Any, Optional


class ClientError(Exception):
    def __init__(
        self,
        message: str,
        error_code: str,
        context: Optional[dict[str, Any]] = None,
        status_code: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe payload for caller-side logging."""
        context = {k: _json_safe(v) for k, v in (self.context or {}).items()}
        return {
            "error_code": self.error_code,
            "message": self.message,
            "status_code": self.status_code,
            "context": context,
        }


class MalformedResponseError(ClientError):
    def __init__(self, response: str, parse_error: str):
        super().__init__(
            "LLM returned invalid JSON",
            "INVALID_LLM_RESPONSE",
            {"response": response, "parse_error": parse_error},
        )


class IncompleteResponseError(ClientError):
    def __init__(self, response: str, details: Optional[list[str]] = None):
        super().__init__(
            "LLM response missing required fields",
            "INCOMPLETE_LLM_RESPONSE",
            {"response": response, "expected": ["botResponse", "extractedFields"], "details": details or []},
        )


class UnknownFieldError(ClientError):
    def __init__(self, field_name: str, form_id: str):
        super().__init__(
            "Field not in form definition",
            "UNKNOWN_FIELD",
            {"field_name": field_name, "form_id": form_id},
        )
        self.field_name = field_name

    def __str__(self) -> str:
        return f"{self.message}: {self.field_name}"


class FieldValidationError(ClientError):
    def __init__(self, reason: str, field_name: str, value: Any, form_id: str):
        super().__init__(
            reason,
            "VALIDATION_ERROR",
            {"field_name": field_name, "value": value, "form_id": form_id},
        )
        self.field_name = field_name


def _json_safe(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    isoformat = getattr(value, "isoformat", None)
    if callable(isoformat):
        return isoformat()
    return str(value)
