# -*- coding: utf-8 -*-
from functools import wraps
from typing import Any, Dict, Optional, Union

from fastapi import APIRouter, HTTPException, Request, status
from loguru import logger

from app import config
from app.rate_limiter import limiter


def router_request(
    *,
    method: str,
    router: APIRouter,
    path: str,
    response_model: Any = None,
    responses: Optional[Dict[Union[int, str], Dict[str, Any]]] = None,
    **route_kwargs: Any,
):
    """
    Register a rate limited route that logs every request outcome.

    The decorated endpoint must take a `request: Request` argument.
    """

    def decorator(f):
        @router.api_route(
            path,
            methods=[method],
            response_model=response_model,
            responses=responses,
            **route_kwargs,
        )
        @limiter.limit(config.RATE_LIMIT_DEFAULT)
        @wraps(f)
        async def wrapper(*args, **kwargs):
            request: Request = None
            if "request" not in kwargs:
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail="The request dependency is missing. This is a bug. Please report it.",
                )
            request = kwargs["request"]
            full_path = router.prefix + path
            query_params = dict(request.query_params)
            try:
                response = await f(*args, **kwargs)
                logger.debug(f"{request.method} {full_path} {query_params} -> 200")
                return response
            except HTTPException as exc:
                logger.debug(
                    f"{request.method} {full_path} {query_params} -> {exc.status_code}"
                )
                raise exc

        return wrapper

    return decorator
