# labsvc/main.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from labsvc import API_PREFIX
from labsvc.core.config import settings
from labsvc.core.database import engine, get_session
from labsvc.core.exceptions import NotFound, StoreUnavailable
from labsvc.core.logging_config import setup_logging

from labsvc.domains.lims.routers import router as lims_router
from labsvc.domains.inv.routers import router as inv_router
from labsvc.domains.ord.routers import router as ord_router

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 수명 주기를 처리합니다. 종료 시 DB 연결 풀을 정리합니다.
    스키마/테이블 생성은 scripts/create_tables.py 로 수행합니다.
    """
    logger.info("%s 시작 (env=%s, store=%s)", settings.APP_NAME, settings.APP_ENV, settings.RECORD_STORE_BACKEND)

    yield  # 애플리케이션 실행

    logger.info("%s 종료 중...", settings.APP_NAME)
    await engine.dispose()
    logger.info("데이터베이스 연결 풀 종료 완료.")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# -- CORS 미들웨어 설정 --
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -- 서비스 예외 → HTTP 응답 변환 --
@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(StoreUnavailable)
async def store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
    logger.error("%s %s 처리 실패: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Record store unavailable"},
    )


# -- 도메인 라우터 포함 --
app.include_router(lims_router, prefix=f"{API_PREFIX}/lims", tags=["Lab Test Management (검사 항목 관리)"])
app.include_router(inv_router, prefix=f"{API_PREFIX}/inv", tags=["Inventory Management (재고 관리)"])
app.include_router(ord_router, prefix=f"{API_PREFIX}/ord", tags=["Order Management (주문 관리)"])


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    데이터베이스에 select(1)을 실행하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        result = await session.exec(select(1))
        if result.first():
            return {"status": "ok", "database_connection": "successful"}
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database connection error during health check: {e}"
        )
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Database health check failed: No result from test query"
    )


# -- Uvicorn 서버 직접 실행 (개발용) --
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("labsvc.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
