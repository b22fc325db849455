#!/usr/bin/env python3
"""
File: progress.py
Description: 연습 세션 진행도 (점수, 연속 기록, 평균, 완료 지문 수)
"""

from dataclasses import dataclass, asdict, replace
from typing import Dict, List, Any, Iterable, Optional

from readcoach.config import settings
from readcoach.common.utils import round_half_up


def streak_badge(streak: int) -> str:
    """연속 기록에 맞는 배지"""
    if streak >= 5:
        return "🔥"
    if streak >= 3:
        return "⭐"
    if streak >= 1:
        return "✨"
    return "💪"


@dataclass(frozen=True)
class SessionProgress:
    """세션 진행 상태. record()는 새 상태를 반환한다"""
    score: int = 0
    streak: int = 0
    total_attempts: int = 0
    best_score: int = 0
    average_score: int = 0
    completed_passages: int = 0
    # 누적 점수 합계 (평균 계산용)
    _total_score: int = 0

    def record(self, score: int, streak_threshold: Optional[int] = None,
               completion_threshold: Optional[int] = None) -> "SessionProgress":
        """
        새 시도 점수를 반영한 진행 상태

        Args:
            score: 시도 정확도 (0-100)
            streak_threshold: 연속 기록 유지 기준 (기본값: settings.STREAK_THRESHOLD)
            completion_threshold: 지문 완료 기준 (기본값: settings.COMPLETION_THRESHOLD)
        """
        if streak_threshold is None:
            streak_threshold = settings.STREAK_THRESHOLD
        if completion_threshold is None:
            completion_threshold = settings.COMPLETION_THRESHOLD

        total_attempts = self.total_attempts + 1
        total_score = self._total_score + score

        return replace(
            self,
            score=score,
            streak=self.streak + 1 if score >= streak_threshold else 0,
            total_attempts=total_attempts,
            best_score=max(self.best_score, score),
            average_score=round_half_up(total_score / total_attempts),
            completed_passages=self.completed_passages + (1 if score >= completion_threshold else 0),
            _total_score=total_score,
        )

    @classmethod
    def from_scores(cls, scores: Iterable[int]) -> "SessionProgress":
        """시간 순서의 점수 목록으로 진행 상태를 재구성"""
        progress = cls()
        for score in scores:
            progress = progress.record(score)
        return progress

    def progress_percentage(self, goal: Optional[int] = None) -> float:
        """목표 지문 수 대비 완료율 (최대 100)"""
        goal = goal or settings.PASSAGE_GOAL
        return min(self.completed_passages * 100 / goal, 100)

    def achievements(self, goal: Optional[int] = None) -> List[Dict[str, str]]:
        """달성한 세션 업적 목록"""
        goal = goal or settings.PASSAGE_GOAL
        earned = []

        if self.best_score >= 95:
            earned.append({"id": "near_perfect", "title": "Near Perfect Score!", "emoji": "🏆"})
        if self.streak >= 3:
            earned.append({"id": "hot_streak", "title": "Hot Streak!", "emoji": "🔥"})
        if self.total_attempts >= 5:
            earned.append({"id": "dedicated_learner", "title": "Dedicated Learner", "emoji": "📚"})
        if self.average_score >= 85 and self.total_attempts >= 3:
            earned.append({"id": "consistent_excellence", "title": "Consistent Excellence", "emoji": "⭐"})
        if self.completed_passages >= goal:
            earned.append({"id": "goal_achieved", "title": "Goal Achieved!", "emoji": "🎯"})

        return earned

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data.pop("_total_score")
        data["streak_badge"] = streak_badge(self.streak)
        data["progress_percentage"] = self.progress_percentage()
        data["achievements"] = self.achievements()
        return data
