#!/usr/bin/env python3
"""
File: feedback.py
Description: 점수 메시지 및 지문 단어별 하이라이트
"""

from typing import Dict, List, Any

# (하한 점수, 등급, 메시지) - 높은 점수부터
SCORE_BANDS = [
    (90, "excellent", "Excellent pronunciation! 🎉"),
    (80, "great", "Great job! Minor improvements needed. 👍"),
    (70, "good", "Good effort! Keep practicing. 📚"),
]
NEEDS_PRACTICE = ("needs_practice", "Needs practice. Don't give up! 💪")

# (하한 점수, 이모지) - 기록 목록 표시용
SCORE_EMOJIS = [
    (95, "🏆"),
    (90, "🎯"),
    (80, "👍"),
    (70, "📚"),
]


def score_band(score: int) -> str:
    """점수 등급 (excellent / great / good / needs_practice)"""
    for threshold, band, _ in SCORE_BANDS:
        if score >= threshold:
            return band
    return NEEDS_PRACTICE[0]


def score_message(score: int) -> str:
    """점수에 맞는 격려 메시지"""
    for threshold, _, message in SCORE_BANDS:
        if score >= threshold:
            return message
    return NEEDS_PRACTICE[1]


def score_emoji(score: int) -> str:
    """기록 목록에 표시할 점수 이모지"""
    for threshold, emoji in SCORE_EMOJIS:
        if score >= threshold:
            return emoji
    return "💪"


def highlight_passage(reference_text: str, transcription: str) -> List[Dict[str, Any]]:
    """
    참조 지문의 각 단어를 인식 결과와 같은 위치끼리 비교하여 표시 상태를 계산

    Args:
        reference_text: 참조 지문 (원래 대소문자 유지)
        transcription: 음성 인식 결과

    Returns:
        단어별 사전 목록. status는 correct / mismatch / missing
    """
    reference_words = (reference_text or "").split()
    heard_words = (transcription or "").lower().split()
    highlights = []

    for index, word in enumerate(reference_words):
        entry = {"index": index, "word": word, "heard": None, "status": "missing"}

        if index < len(heard_words):
            entry["heard"] = heard_words[index]
            entry["status"] = "correct" if word.lower() == heard_words[index] else "mismatch"

        highlights.append(entry)

    return highlights
