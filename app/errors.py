# app/errors.py
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.logger import get_logger

log = get_logger(__name__)


class StoryError(Exception):
    """Base for every failure the API reports. The message is sent to the caller verbatim."""
    status_code: int = 500
    message: str = "Internal server error during content generation."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MethodNotAllowed(StoryError):
    status_code = 405
    message = "Method Not Allowed"


class BadRequest(StoryError):
    status_code = 400
    message = "Missing required parameters (topic, theme, or value)."


class UpstreamEmpty(StoryError):
    status_code = 500
    message = "Gemini API failed to return structured content."


class InternalError(StoryError):
    status_code = 500
    message = "Internal server error during content generation."


def error_response(exc: StoryError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def story_error_handler(request: Request, exc: StoryError) -> JSONResponse:
    return error_response(exc)


async def starlette_http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        log.info(f"[story] rejected {request.method} {request.url.path}")
        resp = error_response(MethodNotAllowed())
        if exc.headers and "Allow" in exc.headers:
            resp.headers["Allow"] = exc.headers["Allow"]
        return resp
    return await http_exception_handler(request, exc)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = sorted({".".join(str(p) for p in e.get("loc", ())[1:]) for e in exc.errors()})
    log.warning(f"[story] bad request on {request.url.path}: invalid fields {fields}")
    return error_response(BadRequest())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception(f"[story] unhandled error on {request.method} {request.url.path}: {exc}")
    return error_response(InternalError())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoryError, story_error_handler)
    app.add_exception_handler(StarletteHTTPException, starlette_http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
