#!/usr/bin/env python3
"""
File: passages.py
Description: 연습 지문 API 엔드포인트
"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query

from readcoach.common.exceptions import PassageNotFoundError
from readcoach.common.utils import setup_logger
from readcoach.services.passages import PassageCatalog

# 라우터 설정
router = APIRouter(
    prefix="/api/passages",
    tags=["passages"],
    responses={404: {"description": "Not found"}},
)

# 로거 설정
logger = setup_logger("passages_router", "passages_router.log")

# 지문 목록 인스턴스
passage_catalog = PassageCatalog()


@router.get("", response_model=dict)
async def list_passages(difficulty: Optional[str] = Query(None, description="난이도 (All / Easy / Medium / Hard)")):
    """난이도별 연습 지문 목록"""
    passages = passage_catalog.list_passages(difficulty)
    return {"count": len(passages), "passages": passages}


@router.get("/{passage_id}", response_model=dict)
async def get_passage(passage_id: str):
    """연습 지문 상세"""
    try:
        return passage_catalog.get_passage(passage_id)
    except PassageNotFoundError as e:
        logger.error(str(e))
        raise HTTPException(status_code=404, detail=str(e))
