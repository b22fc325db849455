#!/usr/bin/env python3
"""
File: history.py
Description: 연습 시도 기록 저장 및 조회
"""

import json
from typing import Dict, List, Any, Optional

from sqlalchemy.orm import Session

from readcoach.config import settings
from readcoach.common.utils import setup_logger
from readcoach.db import PracticeAttempt
from readcoach.services.feedback import score_emoji
from readcoach.services.pronunciation import AnalysisResult
from readcoach.services.progress import SessionProgress

logger = setup_logger('history', 'history.log')


def attempt_to_dict(attempt: PracticeAttempt) -> Dict[str, Any]:
    """DB 레코드를 응답용 사전으로 변환"""
    return {
        "id": attempt.id,
        "passage_id": attempt.passage_id,
        "passage_text": attempt.passage_text,
        "transcription": attempt.transcription,
        "accuracy_score": attempt.accuracy_score,
        "emoji": score_emoji(attempt.accuracy_score),
        "issues": json.loads(attempt.issues or "[]"),
        "tips": json.loads(attempt.tips or "[]"),
        "created_at": attempt.created_at.isoformat() if attempt.created_at else None,
    }


def save_attempt(db: Session, passage_text: str, transcription: str,
                 result: AnalysisResult, passage_id: Optional[str] = None) -> PracticeAttempt:
    """
    분석 결과를 기록으로 저장

    Args:
        db: DB 세션
        passage_text: 참조 지문
        transcription: 음성 인식 결과
        result: 분석 결과
        passage_id: 연습 지문 ID (옵션)

    Returns:
        저장된 PracticeAttempt
    """
    attempt = PracticeAttempt(
        passage_id=passage_id,
        passage_text=passage_text,
        transcription=transcription,
        accuracy_score=result.accuracy_score,
        issues=json.dumps([issue.to_dict() for issue in result.issues], ensure_ascii=False),
        tips=json.dumps(result.tips, ensure_ascii=False),
    )
    db.add(attempt)
    db.commit()
    db.refresh(attempt)

    logger.info(f"연습 기록 저장 - ID: {attempt.id}, 정확도: {attempt.accuracy_score}%")
    return attempt


def list_attempts(db: Session, limit: Optional[int] = None) -> List[PracticeAttempt]:
    """최근 기록부터 반환"""
    limit = limit or settings.HISTORY_LIMIT
    return (
        db.query(PracticeAttempt)
        .order_by(PracticeAttempt.created_at.desc(), PracticeAttempt.id.desc())
        .limit(limit)
        .all()
    )


def get_attempt(db: Session, attempt_id: int) -> Optional[PracticeAttempt]:
    return db.get(PracticeAttempt, attempt_id)


def clear_attempts(db: Session) -> int:
    """모든 기록 삭제. 삭제된 행 수 반환"""
    deleted = db.query(PracticeAttempt).delete()
    db.commit()
    logger.info(f"연습 기록 {deleted}건 삭제")
    return deleted


def get_progress(db: Session) -> SessionProgress:
    """저장된 전체 기록으로 진행 상태 계산 (시간 순)"""
    scores = [
        score for (score,) in
        db.query(PracticeAttempt.accuracy_score)
        .order_by(PracticeAttempt.created_at.asc(), PracticeAttempt.id.asc())
        .all()
    ]
    return SessionProgress.from_scores(scores)
