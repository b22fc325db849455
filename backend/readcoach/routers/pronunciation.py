#!/usr/bin/env python3
"""
File: pronunciation.py
Description: 발음 분석 API 엔드포인트
"""

from typing import Dict, List, Any, Optional
from pydantic import BaseModel, Field
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session

from readcoach.config import settings
from readcoach.db import get_db
from readcoach.common.exceptions import UnknownScenarioError
from readcoach.common.utils import setup_logger
from readcoach.services.pronunciation import PronunciationAnalyzer, AnalysisResult, ISSUE_TYPES
from readcoach.services.feedback import score_band, score_message, score_emoji, highlight_passage
from readcoach.services.demo import simulate_transcription, DEMO_SCENARIOS
from readcoach.services import history

# 라우터 설정
router = APIRouter(
    prefix="/api/pronunciation",
    tags=["pronunciation"],
    responses={404: {"description": "Not found"}},
)

# 로거 설정
logger = setup_logger("pronunciation_router", "pronunciation_router.log")


# 데이터 모델 정의
class AnalyzeRequest(BaseModel):
    """낭독 분석 요청 모델"""
    reference_text: str = Field(..., description="참조 지문")
    transcription: str = Field("", description="음성 인식 결과")
    passage_id: Optional[str] = Field(None, description="연습 지문 ID")
    save: bool = Field(False, description="연습 기록 저장 여부")

class WordRequest(BaseModel):
    """단어 단위 분석 요청 모델"""
    expected: str = Field(..., description="기대 단어")
    actual: str = Field("", description="실제 인식된 단어")

class IssueModel(BaseModel):
    """발음 문제 모델"""
    word: str
    expected: str
    actual: str
    position: int
    accuracy: int
    type: str

class TipsRequest(BaseModel):
    """팁 요청 모델"""
    issues: List[Dict[str, Any]] = Field(default_factory=list, description="발음 문제 목록")

class DemoRequest(BaseModel):
    """데모 분석 요청 모델"""
    reference_text: str = Field(..., description="참조 지문")
    scenario: str = Field(..., description="데모 시나리오")

class AnalyzeResponse(BaseModel):
    """낭독 분석 응답 모델"""
    accuracy_score: int
    issues: List[IssueModel]
    tips: List[str]
    message: str
    band: str
    emoji: str
    highlights: List[Dict[str, Any]]
    transcription: str
    attempt_id: Optional[int] = None


def get_analyzer() -> PronunciationAnalyzer:
    """현재 설정의 정렬 방식으로 분석기 생성"""
    return PronunciationAnalyzer({"alignment_mode": settings.ALIGNMENT_MODE})


def build_response(reference_text: str, transcription: str, result: AnalysisResult,
                   attempt_id: Optional[int] = None) -> Dict[str, Any]:
    response = result.to_dict()
    response.update({
        "message": score_message(result.accuracy_score),
        "band": score_band(result.accuracy_score),
        "emoji": score_emoji(result.accuracy_score),
        "highlights": highlight_passage(reference_text, transcription),
        "transcription": transcription,
        "attempt_id": attempt_id,
    })
    return response


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_reading(
    request: AnalyzeRequest,
    analyzer: PronunciationAnalyzer = Depends(get_analyzer),
    db: Session = Depends(get_db),
):
    """
    참조 지문과 음성 인식 결과를 비교하여 정확도, 발음 문제, 팁을 반환합니다.
    """
    try:
        logger.info(f"낭독 분석 요청 - 지문 ID: {request.passage_id}, 저장: {request.save}")

        result = analyzer.analyze(request.reference_text, request.transcription)

        attempt_id = None
        if request.save:
            attempt = history.save_attempt(
                db,
                passage_text=request.reference_text,
                transcription=request.transcription,
                result=result,
                passage_id=request.passage_id,
            )
            attempt_id = attempt.id

        return build_response(request.reference_text, request.transcription, result, attempt_id)

    except HTTPException as e:
        raise e
    except Exception as e:
        logger.error(f"낭독 분석 오류: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"낭독 분석 중 오류가 발생했습니다: {str(e)}")


@router.post("/word", response_model=dict)
async def analyze_word(request: WordRequest, analyzer: PronunciationAnalyzer = Depends(get_analyzer)):
    """단어 하나의 정확도와 문제 유형"""
    accuracy = analyzer.calculate_phoneme_accuracy(request.expected, request.actual)
    issue_type = analyzer.classify_issue(request.expected, request.actual) if accuracy < 100 else None
    return {
        "expected": request.expected,
        "actual": request.actual,
        "accuracy": accuracy,
        "type": issue_type,
    }


@router.post("/tips", response_model=dict)
async def pronunciation_tips(request: TipsRequest, analyzer: PronunciationAnalyzer = Depends(get_analyzer)):
    """발음 문제 목록에 맞는 코칭 팁"""
    return {"tips": analyzer.get_pronunciation_tips(request.issues)}


@router.post("/demo", response_model=AnalyzeResponse)
async def run_demo(request: DemoRequest, analyzer: PronunciationAnalyzer = Depends(get_analyzer)):
    """
    시나리오별 모의 인식 결과로 분석을 실행합니다. (기록은 저장하지 않음)
    """
    try:
        transcription = simulate_transcription(request.reference_text, request.scenario)
    except UnknownScenarioError as e:
        logger.error(f"데모 시나리오 오류: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    result = analyzer.analyze(request.reference_text, transcription)
    return build_response(request.reference_text, transcription, result)


@router.get("/settings", response_model=dict)
async def get_pronunciation_settings():
    """
    발음 분석 설정 조회
    """
    return {
        "alignment_mode": settings.ALIGNMENT_MODE,
        "issue_types": list(ISSUE_TYPES),
        "demo_scenarios": list(DEMO_SCENARIOS),
        "streak_threshold": settings.STREAK_THRESHOLD,
        "completion_threshold": settings.COMPLETION_THRESHOLD,
    }
