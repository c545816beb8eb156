"""
Error handler decorator for HTTP endpoints.

Converts ``AppException`` instances into ``HTTPException`` responses so that
endpoints don't repeat try/except blocks.
"""

from functools import wraps
from typing import Any, Callable

from fastapi import HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from oillab.exceptions import AppException, StorageError, ValidationError
from oillab.logging import logger


def handle_http_errors(func: Callable) -> Callable:
    """
    Decorator for HTTP endpoints to convert AppException to HTTPException.

    - ``ValidationError`` -> 400 JSON body ``{"detail": msg, "field": field}``
    - ``StorageError`` and raw ``SQLAlchemyError`` -> 500 with a generic message
    - any other ``AppException`` -> its ``http_status``

    Args:
        func: The HTTP endpoint function to wrap.

    Returns:
        Wrapped function that handles exceptions.

    Example:
        ```python
        @router.post("/lubricants/list")
        @handle_http_errors
        async def list_lubricants(args: LubricantPaginateArgs, repo: LubricantRepoDep):
            return await ListLubricantsCommand(repo).execute(args)
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except ValidationError as ex:
            logger.warning(
                f"ValidationError in {func.__name__}: {ex.message}",
                extra={"field": ex.field},
            )
            return JSONResponse(
                status_code=ex.http_status,
                content={"detail": ex.message, "field": ex.field},
            )
        except StorageError as ex:
            logger.error(
                f"Storage error in {func.__name__}: {ex.message}",
                exc_info=True,
            )
            raise HTTPException(
                status_code=ex.http_status,
                detail="Database error occurred",
            )
        except AppException as ex:
            logger.warning(
                f"AppException in {func.__name__}: {ex.message}",
                extra={"exception_type": type(ex).__name__},
            )
            raise HTTPException(
                status_code=ex.http_status,
                detail=ex.message,
            )
        except SQLAlchemyError as ex:
            logger.error(
                f"Database error in {func.__name__}: {ex}",
                exc_info=True,
            )
            raise HTTPException(
                status_code=500,
                detail="Database error occurred",
            )

    return wrapper
