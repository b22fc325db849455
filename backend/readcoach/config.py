#!/usr/bin/env python3
"""
File: config.py
Description: 애플리케이션 설정 및 환경 변수 관리
"""

from pathlib import Path
from typing import List, Literal
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """애플리케이션 설정 클래스"""

    # 기본 설정
    APP_NAME: str = "낭독 발음 코치"
    APP_VERSION: str = "0.4.0"
    DEBUG: bool = True

    # 서버 설정
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_RELOAD: bool = True

    # CORS 설정
    CORS_ORIGINS: List[str] = ["*"]

    # 파일 경로 설정 (backend 디렉토리 기준 상대 경로)
    DATA_DIR: str = "data"
    LOG_DIR: str = "data/logs"
    DB_FILE: str = "data/readcoach.db"
    PASSAGES_FILE: str = ""

    # 발음 분석 설정
    ALIGNMENT_MODE: Literal["positional", "sequence"] = "positional"

    # 기록 및 진행도 설정
    HISTORY_LIMIT: int = 20
    STREAK_THRESHOLD: int = 80
    COMPLETION_THRESHOLD: int = 70
    PASSAGE_GOAL: int = 5

    class Config:
        env_file = ".env"
        case_sensitive = True

# 설정 인스턴스 생성
settings = Settings()

# 프로젝트 루트 디렉토리 경로
def get_project_root() -> Path:
    """프로젝트 루트 디렉토리 반환"""
    return Path(__file__).parent.parent.parent

def resolve_backend_path(path: str) -> Path:
    """backend 디렉토리 기준 상대 경로를 절대 경로로 변환"""
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return get_project_root() / "backend" / candidate

# 필요한 디렉토리 생성
def ensure_directories():
    """필요한 디렉토리가 존재하는지 확인하고 없으면 생성"""
    dirs = [
        settings.DATA_DIR,
        settings.LOG_DIR,
        str(Path(settings.DB_FILE).parent),
    ]

    print("필요한 디렉토리 생성 중...")
    for dir_path in dirs:
        full_path = resolve_backend_path(dir_path)
        full_path.mkdir(parents=True, exist_ok=True)
        print(f"  - 디렉토리 확인: {full_path}")

    print("디렉토리 생성 완료")
