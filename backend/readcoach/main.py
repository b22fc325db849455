#!/usr/bin/env python3
"""
File: main.py
Description: FastAPI 애플리케이션 진입점
"""

import traceback

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from readcoach.config import settings
from readcoach.middleware import setup_middlewares
from readcoach.routers import pronunciation, passages, history

# 앱 설정
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

# 미들웨어 설정
setup_middlewares(app)

# 라우터 등록
app.include_router(pronunciation.router)
app.include_router(passages.router)
app.include_router(history.router)

# 메인 라우트
@app.get("/api")
async def root():
    """메인 API 경로"""
    return {
        "message": "낭독 발음 코치 API",
        "version": settings.APP_VERSION
    }

# 오류 핸들러
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """전역 예외 처리기"""
    error_trace = traceback.format_exc()
    return JSONResponse(
        status_code=500,
        content={
            "message": f"내부 서버 오류: {str(exc)}",
            "trace": error_trace if settings.DEBUG else "디버그 모드에서만 표시됩니다."
        }
    )

# 앱 시작 시 실행
@app.on_event("startup")
async def startup():
    """앱 시작 시 실행되는 함수"""
    print(f"=== {settings.APP_NAME} v{settings.APP_VERSION} 시작 ===")
    print(f"API 문서: http://{settings.API_HOST}:{settings.API_PORT}/api/docs")

    # 필요한 디렉토리 및 테이블 생성
    from readcoach.config import ensure_directories
    from readcoach.db import create_tables
    ensure_directories()
    create_tables()

# 앱 종료 시 실행
@app.on_event("shutdown")
async def shutdown():
    """앱 종료 시 실행되는 함수"""
    print(f"=== {settings.APP_NAME} 종료 ===")

def run():
    """uvicorn 서버 실행"""
    uvicorn.run(
        "readcoach.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD
    )

# 직접 실행 시
if __name__ == "__main__":
    run()
