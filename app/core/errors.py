from functools import wraps
from typing import Awaitable, Callable, List

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from app.core.logger import logger


class BlogError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class PostNotFoundError(BlogError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Post not found"


class PostValidationError(BlogError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid post"

    def __init__(self, errors: List[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = list(errors)


def handle_errors(action: str):
    """Answer unexpected failures inside a route with a plain-text 500.

    ``BlogError`` and ``HTTPException`` pass through to the app handlers.
    """

    def decorator(func: Callable[..., Awaitable]):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except (BlogError, HTTPException):
                raise
            except Exception as exc:
                logger.exception("post_handler_failed", action=action, handler=func.__name__)
                return PlainTextResponse(
                    f"{action}: {exc}",
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                )

        return wrapper

    return decorator


async def blog_error_handler(request: Request, exc: BlogError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BlogError, blog_error_handler)
