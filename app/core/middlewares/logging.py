"""요청/응답 로깅 미들웨어"""

import time
from typing import Callable, cast

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import get_logger
from app.core.middlewares.context import set_request_id

logger = get_logger(__name__)

# 로깅 제외 경로
EXCLUDE_PATHS = {"/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico"}


class LoggingMiddleware(BaseHTTPMiddleware):
    """요청 ID 부여, 요청/응답 로깅 및 처리 시간 측정"""

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        if request.url.path in EXCLUDE_PATHS:
            return cast(Response, await call_next(request))

        request_id = set_request_id(request.headers.get("X-Request-ID"))

        logger.info(
            f"[{request_id}] → {request.method} {request.url.path} "
            f"| Client: {request.client.host if request.client else 'unknown'}"
        )

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.error(
                f"[{request_id}] ✗ {request.method} {request.url.path} "
                f"| Error: {str(e)} | Time: {elapsed_ms:.2f}ms"
            )
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{elapsed_ms:.2f}ms"

        status_emoji = "✓" if response.status_code < 400 else "✗"
        log_method = (
            logger.info if response.status_code < 400 else logger.warning
        )
        log_method(
            f"[{request_id}] {status_emoji} {request.method} "
            f"{request.url.path} | Status: {response.status_code} "
            f"| Time: {elapsed_ms:.2f}ms"
        )

        return cast(Response, response)
