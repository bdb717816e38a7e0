from typing import Any

from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "An unexpected error occurred"
    openapi_description: str = "Returned when an unexpected error occurs."
    openapi_example: dict[str, str] | None = None

    def __init__(self, detail: str | None = None):
        if detail:
            self.detail = detail
        super().__init__(self.detail)


class InsufficientRole(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "You do not have permission to perform this action."
    openapi_description = "Returned when the account's role lacks the capability."


def error_responses(*errors: type[AppError]) -> dict[int | str, dict[str, Any]]:
    """
    Build the `responses` mapping of a route from the errors it can raise,
    grouped by status code, so they show up in the OpenAPI schema.
    """
    responses: dict[int | str, dict[str, Any]] = {}
    for error in errors:
        entry = responses.setdefault(
            error.status_code, {"description": error.openapi_description}
        )
        if error.openapi_description not in entry["description"]:
            entry["description"] += f" Or: {error.openapi_description}"
        jsend_status = "fail" if error.status_code < 500 else "error"
        example = error.openapi_example or {
            "status": jsend_status,
            # Errors that format their message per instance fall back to the description
            "message": vars(error).get("detail", error.openapi_description),
        }
        entry.setdefault("content", {"application/json": {"example": example}})
    return responses
