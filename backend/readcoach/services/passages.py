#!/usr/bin/env python3
"""
File: passages.py
Description: 연습 지문 목록 관리
"""

from pathlib import Path
from typing import Dict, List, Any, Optional

from readcoach.config import settings, resolve_backend_path
from readcoach.common.exceptions import PassageNotFoundError
from readcoach.common.utils import setup_logger, load_config

logger = setup_logger('passages', 'passages.log')

DEFAULT_PASSAGES_FILE = Path(__file__).parent.parent / "data" / "passages.yaml"

DIFFICULTIES = ["Easy", "Medium", "Hard"]


class PassageCatalog:
    """YAML 파일에서 읽은 연습 지문 목록"""

    def __init__(self, passages_file: Optional[str] = None):
        """
        PassageCatalog 초기화

        Args:
            passages_file: 지문 YAML 파일 경로 (기본값: settings.PASSAGES_FILE 또는 내장 파일)
        """
        passages_file = passages_file or settings.PASSAGES_FILE
        self.passages_file = resolve_backend_path(passages_file) if passages_file else DEFAULT_PASSAGES_FILE
        self.passages = self._load_passages()

    def _load_passages(self) -> List[Dict[str, Any]]:
        config = load_config(str(self.passages_file), {"passages": []}) or {}
        passages = []

        for item in config.get("passages", []):
            if not item.get("id") or not item.get("text"):
                logger.warning(f"id 또는 text가 없는 지문은 건너뜁니다: {item}")
                continue
            passages.append({
                "id": str(item["id"]),
                "title": item.get("title", ""),
                "text": " ".join(str(item["text"]).split()),
                "difficulty": item.get("difficulty", "Easy"),
            })

        logger.info(f"연습 지문 {len(passages)}개 로드: {self.passages_file}")
        return passages

    def list_passages(self, difficulty: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        난이도별 지문 목록

        Args:
            difficulty: Easy / Medium / Hard (None 또는 'All'이면 전체, 대소문자 무시)
        """
        if not difficulty or difficulty.lower() == "all":
            return list(self.passages)
        return [p for p in self.passages if p["difficulty"].lower() == difficulty.lower()]

    def get_passage(self, passage_id: str) -> Dict[str, Any]:
        """ID로 지문 조회. 없으면 PassageNotFoundError"""
        for passage in self.passages:
            if passage["id"] == str(passage_id):
                return passage
        raise PassageNotFoundError(str(passage_id))
