"""Maps request validation failures to 400 responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from article_api.application.schemas import validation_messages

# Path/query parameter → message for a malformed value.
_PARAMETER_MESSAGES: dict[str, str] = {
    "article_id": "Invalid article ID",
    "limit": "Invalid limit",
    "offset": "Invalid offset",
}


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer 400 instead of FastAPI's default 422.

    Body errors win over parameter errors and are reported one message per
    field; a malformed parameter is reported as a single message.
    """
    errors = exc.errors()
    body_errors = [e for e in errors if e.get("loc") and e["loc"][0] == "body"]

    if body_errors:
        malformed = next((e for e in body_errors if e.get("type") == "json_invalid"), None)
        if malformed is not None:
            reason = (malformed.get("ctx") or {}).get("error", malformed.get("msg"))
            detail: str | list[str] = f"Malformed JSON body: {reason}"
        else:
            detail = validation_messages(body_errors)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})

    name = str(errors[0]["loc"][-1]) if errors and errors[0].get("loc") else "request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _PARAMETER_MESSAGES.get(name, f"Invalid {name}")},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
