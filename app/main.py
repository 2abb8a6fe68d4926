from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from app.api import api_router
from app.core.config import settings
from app.core.exceptions import (
    BaseAPIException,
    base_exception_handler,
    generic_exception_handler,
    http_exception_handler,
)
from app.core.firebase import close_firebase_client, get_firebase_client
from app.core.logging import get_logger, setup_logging
from app.core.middlewares import LoggingMiddleware
from app.core.schemas import APIResponse

# 로깅 설정 초기화
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리"""
    # Startup: Firebase 클라이언트는 프로세스당 한 번만 생성
    logger.info(f"🚀 Starting {settings.app_name}...")
    get_firebase_client()

    yield
    # Shutdown
    logger.info(f"👋 Shutting down {settings.app_name}...")
    close_firebase_client()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리"""
    app = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=settings.app_version,
        servers=[
            {
                "url": f"http://localhost:{settings.port}",
                "description": "Servidor local",
            }
        ],
        lifespan=lifespan,
    )

    # 미들웨어 설정 (순서 중요: 아래에서 위로 실행됨)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    # 예외 핸들러 등록
    app.add_exception_handler(BaseAPIException, base_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(api_router)

    return app


app = create_app()


@app.get(
    "/health", tags=["Health"], response_model=APIResponse[dict[str, Any]]
)
async def health_check():
    """헬스 체크 엔드포인트"""
    return APIResponse(
        success=True,
        message="OK",
        data={
            "status": "healthy",
            "app_name": settings.app_name,
            "environment": settings.app_env,
        },
    )


def run() -> None:
    """uvicorn 서버 실행 (HOST:PORT)"""
    logger.info(f"API corriendo en http://localhost:{settings.port}")
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development and settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    run()
