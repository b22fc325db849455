#!/usr/bin/env python3
"""
File: history.py
Description: 연습 기록 및 진행도 API 엔드포인트
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy.orm import Session

from readcoach.config import settings
from readcoach.db import get_db
from readcoach.common.utils import setup_logger
from readcoach.services import history

# 라우터 설정
router = APIRouter(
    prefix="/api/history",
    tags=["history"],
    responses={404: {"description": "Not found"}},
)

# 로거 설정
logger = setup_logger("history_router", "history_router.log")


@router.get("", response_model=dict)
async def list_history(
    limit: int = Query(settings.HISTORY_LIMIT, ge=1, le=500, description="최대 조회 개수"),
    db: Session = Depends(get_db),
):
    """최근 연습 기록"""
    attempts = history.list_attempts(db, limit)
    return {
        "count": len(attempts),
        "attempts": [history.attempt_to_dict(a) for a in attempts],
    }


@router.get("/stats", response_model=dict)
async def history_stats(db: Session = Depends(get_db)):
    """전체 기록 기준 세션 진행도"""
    return history.get_progress(db).to_dict()


@router.get("/{attempt_id}", response_model=dict)
async def get_history_item(attempt_id: int, db: Session = Depends(get_db)):
    """연습 기록 상세"""
    attempt = history.get_attempt(db, attempt_id)
    if attempt is None:
        logger.error(f"연습 기록을 찾을 수 없습니다: {attempt_id}")
        raise HTTPException(status_code=404, detail=f"연습 기록을 찾을 수 없습니다: {attempt_id}")
    return history.attempt_to_dict(attempt)


@router.delete("", response_model=dict)
async def clear_history(db: Session = Depends(get_db)):
    """모든 연습 기록 삭제"""
    deleted = history.clear_attempts(db)
    return {"status": "success", "deleted": deleted}
