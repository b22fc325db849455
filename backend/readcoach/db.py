#!/usr/bin/env python3
"""
File: db.py
Description: 데이터베이스 설정 및 모델 정의
"""

import os
import datetime
from pathlib import Path
from typing import Optional
from sqlalchemy import create_engine, Column, Integer, String, Text, DateTime
from sqlalchemy.orm import sessionmaker, declarative_base

from readcoach.config import settings, resolve_backend_path

# 모델 기본 클래스
Base = declarative_base()


def utc_now() -> datetime.datetime:
    """현재 UTC 시각 (SQLite 저장용 naive datetime)"""
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)


# SQLAlchemy 세션 설정 (엔진은 init_engine에서 바인딩)
SessionLocal = sessionmaker(autocommit=False, autoflush=False)
engine = None


class PracticeAttempt(Base):
    """낭독 연습 시도 기록"""
    __tablename__ = "practice_attempts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    passage_id = Column(String(32), nullable=True, index=True)
    passage_text = Column(Text, nullable=False)
    transcription = Column(Text, nullable=False, default="")
    accuracy_score = Column(Integer, nullable=False)
    issues = Column(Text, nullable=False, default="[]")  # JSON
    tips = Column(Text, nullable=False, default="[]")  # JSON
    created_at = Column(DateTime, nullable=False, default=utc_now, index=True)


def init_engine(db_path: Optional[str] = None):
    """
    SQLite 엔진 생성 및 세션 바인딩

    Args:
        db_path: 데이터베이스 파일 경로 (기본값: settings.DB_FILE)
    """
    global engine

    path = resolve_backend_path(db_path or settings.DB_FILE)
    os.makedirs(os.path.dirname(path), exist_ok=True)

    engine = create_engine(f"sqlite:///{Path(path)}", connect_args={"check_same_thread": False})
    SessionLocal.configure(bind=engine)
    return engine


# 데이터베이스 세션 의존성
def get_db():
    """DB 세션 제공"""
    if engine is None:
        init_engine()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# 데이터베이스 테이블 생성
def create_tables():
    """DB 테이블 생성"""
    if engine is None:
        init_engine()

    Base.metadata.create_all(bind=engine)

    print(f"데이터베이스 테이블이 생성되었습니다: {engine.url.database}")


# 앱 시작 시 테이블 확인
if __name__ == "__main__":
    create_tables()
