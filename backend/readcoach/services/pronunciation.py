#!/usr/bin/env python3
"""
File: pronunciation.py
Description: 발음 분석을 위한 코어 모듈

참조 문장과 음성 인식 결과(텍스트)를 비교하여
전체 정확도, 단어별 발음 문제 목록, 코칭 팁을 계산한다.
오디오나 음성 인식 모델은 다루지 않는다.
"""

import difflib
from dataclasses import dataclass, asdict, field
from typing import Dict, List, Any, Optional, Iterable, Tuple, Union

from readcoach.config import settings
from readcoach.common.utils import setup_logger, normalize_word, tokenize, round_half_up
from readcoach.services.knowledge_base import SubstitutionKnowledgeBase, KNOWLEDGE_BASE
from readcoach.services.similarity import similarity

logger = setup_logger('pronunciation_core', 'pronunciation_core.log')

# 알려진 혼동 패턴에 주는 고정 부분 점수
COMMON_SUBSTITUTION_SCORE = 75

# 이 값을 넘는 유사도는 '거의 맞음'으로 분류
SLIGHT_MISPRONUNCIATION_THRESHOLD = 0.7

ALIGNMENT_MODES = ("positional", "sequence")

# 문제 유형
MISSING = "missing"
EXTRA = "extra"
TH_SOUND = "th_sound"
R_L_CONFUSION = "r_l_confusion"
VOWEL_CONFUSION = "vowel_confusion"
SLIGHT_MISPRONUNCIATION = "slight_mispronunciation"
SUBSTITUTION = "substitution"

ISSUE_TYPES = (
    TH_SOUND,
    R_L_CONFUSION,
    VOWEL_CONFUSION,
    SLIGHT_MISPRONUNCIATION,
    SUBSTITUTION,
    MISSING,
    EXTRA,
)

TIP_MESSAGES = {
    TH_SOUND: "Practice 'th' sounds by placing your tongue between your teeth",
    R_L_CONFUSION: "For 'R' sounds, curl your tongue back; for 'L' sounds, touch the roof of your mouth",
    VOWEL_CONFUSION: "Pay attention to vowel length and mouth position",
    MISSING: "Try to pronounce all words clearly - some words may be getting lost",
    SLIGHT_MISPRONUNCIATION: "You're close! Focus on clearer articulation",
}

# (위치, 기대 단어, 실제 단어). 한쪽이 없으면 빈 문자열
Slot = Tuple[int, str, str]


@dataclass(frozen=True)
class PronunciationIssue:
    """정렬된 한 위치에서 기대 단어와 실제 단어가 다른 경우의 기록"""
    word: str
    expected: str
    actual: str
    position: int
    accuracy: int
    type: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AnalysisResult:
    """한 번의 낭독 분석 결과"""
    accuracy_score: int
    issues: List[PronunciationIssue] = field(default_factory=list)
    tips: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accuracy_score": self.accuracy_score,
            "issues": [issue.to_dict() for issue in self.issues],
            "tips": list(self.tips),
        }


class PronunciationAnalyzer:
    """발음 분석을 위한 클래스"""

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 knowledge_base: Optional[SubstitutionKnowledgeBase] = None):
        """
        PronunciationAnalyzer 초기화

        Args:
            config: 설정 (옵션). 'alignment_mode' 키로 정렬 방식을 지정
            knowledge_base: 혼동 패턴 테이블 (기본값: 모듈 전역 테이블)
        """
        self.config = config or {}
        self.alignment_mode = self.config.get("alignment_mode", settings.ALIGNMENT_MODE)
        if self.alignment_mode not in ALIGNMENT_MODES:
            raise ValueError(f"지원하지 않는 정렬 방식입니다: {self.alignment_mode}")
        self.knowledge_base = knowledge_base or KNOWLEDGE_BASE

    def calculate_phoneme_accuracy(self, expected: str, actual: str) -> int:
        """
        단어 하나의 발음 정확도 (0-100)

        완전 일치 -> 100, 알려진 혼동 패턴 -> 75, 그 외에는 편집 거리 유사도
        """
        expected_lower = normalize_word(expected)
        actual_lower = normalize_word(actual)

        if not expected_lower or not actual_lower:
            return 0

        if expected_lower == actual_lower:
            return 100

        if self.knowledge_base.is_common_substitution(expected_lower, actual_lower):
            return COMMON_SUBSTITUTION_SCORE

        return round_half_up(similarity(expected_lower, actual_lower) * 100)

    def classify_issue(self, expected: str, actual: str) -> str:
        """
        발음 문제의 유형 결정

        Args:
            expected: 기대 단어
            actual: 실제 인식된 단어

        Returns:
            문제 유형 태그
        """
        expected = normalize_word(expected)
        actual = normalize_word(actual)

        if not actual:
            return MISSING
        if not expected:
            return EXTRA

        if self.knowledge_base.is_common_substitution(expected, actual):
            if "th" in expected:
                return TH_SOUND
            if ("r" in expected and "l" in actual) or ("l" in expected and "r" in actual):
                return R_L_CONFUSION
            return VOWEL_CONFUSION

        if similarity(expected, actual) > SLIGHT_MISPRONUNCIATION_THRESHOLD:
            return SLIGHT_MISPRONUNCIATION

        return SUBSTITUTION

    def align(self, expected_words: List[str], actual_words: List[str]) -> List[Slot]:
        """
        기대 단어열과 실제 단어열을 정렬

        positional 모드는 같은 인덱스끼리만 비교한다. 단어 하나가 빠지거나
        추가되면 이후 위치가 모두 어긋나는 동작을 그대로 유지한다.
        sequence 모드는 difflib 정렬로 삽입/삭제 이후에 다시 맞춘다.
        sequence 모드에서 extra 위치는 실제 단어열 기준이라 기대 단어의 위치와 겹칠 수 있다.
        """
        if self.alignment_mode == "sequence":
            return self._sequence_align(expected_words, actual_words)

        slots = []
        for i in range(max(len(expected_words), len(actual_words))):
            expected_word = expected_words[i] if i < len(expected_words) else ""
            actual_word = actual_words[i] if i < len(actual_words) else ""
            slots.append((i, expected_word, actual_word))
        return slots

    def _sequence_align(self, expected_words: List[str], actual_words: List[str]) -> List[Slot]:
        matcher = difflib.SequenceMatcher(None, expected_words, actual_words, autojunk=False)
        slots = []

        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                for k in range(i2 - i1):
                    slots.append((i1 + k, expected_words[i1 + k], actual_words[j1 + k]))
            elif tag == "replace":
                for k in range(max(i2 - i1, j2 - j1)):
                    if i1 + k < i2 and j1 + k < j2:
                        slots.append((i1 + k, expected_words[i1 + k], actual_words[j1 + k]))
                    elif i1 + k < i2:
                        slots.append((i1 + k, expected_words[i1 + k], ""))
                    else:
                        slots.append((j1 + k, "", actual_words[j1 + k]))
            elif tag == "delete":
                for k in range(i2 - i1):
                    slots.append((i1 + k, expected_words[i1 + k], ""))
            elif tag == "insert":
                for k in range(j2 - j1):
                    slots.append((j1 + k, "", actual_words[j1 + k]))

        return slots

    def analyze_pronunciation_issues(self, expected: str, actual: str) -> List[PronunciationIssue]:
        """
        문장 단위 발음 문제 목록

        Args:
            expected: 참조 문장
            actual: 음성 인식 결과

        Returns:
            위치 순서대로 정렬된 PronunciationIssue 목록
        """
        issues = []

        for position, expected_word, actual_word in self.align(tokenize(expected), tokenize(actual)):
            if expected_word and actual_word:
                accuracy = self.calculate_phoneme_accuracy(expected_word, actual_word)
                if accuracy < 100:
                    issues.append(PronunciationIssue(
                        word=expected_word,
                        expected=expected_word,
                        actual=actual_word,
                        position=position,
                        accuracy=accuracy,
                        type=self.classify_issue(expected_word, actual_word),
                    ))
            elif expected_word:
                issues.append(PronunciationIssue(
                    word=expected_word,
                    expected=expected_word,
                    actual="",
                    position=position,
                    accuracy=0,
                    type=MISSING,
                ))
            elif actual_word:
                issues.append(PronunciationIssue(
                    word=actual_word,
                    expected="",
                    actual=actual_word,
                    position=position,
                    accuracy=0,
                    type=EXTRA,
                ))

        return issues

    def calculate_overall_accuracy(self, expected: str, actual: str) -> int:
        """
        문장 전체 정확도 (0-100)

        단어별 점수의 평균. 한쪽에만 있는 위치는 0점으로 계산한다.
        """
        expected_words = tokenize(expected)
        actual_words = tokenize(actual)

        if not expected_words or not actual_words:
            return 0

        slots = self.align(expected_words, actual_words)
        total_score = 0
        for _, expected_word, actual_word in slots:
            if expected_word and actual_word:
                total_score += self.calculate_phoneme_accuracy(expected_word, actual_word)

        return round_half_up(total_score / len(slots))

    def get_pronunciation_tips(self, issues: Iterable[Union[PronunciationIssue, Dict[str, Any]]]) -> List[str]:
        """
        발음 문제 유형에 맞는 코칭 팁 (처음 등장한 순서, 중복 없음)

        Args:
            issues: PronunciationIssue 또는 'type' 키를 가진 사전 목록

        Returns:
            팁 문자열 목록
        """
        tips: Dict[str, None] = {}

        for issue in issues:
            if isinstance(issue, dict):
                issue_type = issue.get("type")
            else:
                issue_type = getattr(issue, "type", None)

            message = TIP_MESSAGES.get(issue_type)
            if message:
                tips.setdefault(message, None)

        return list(tips)

    def analyze(self, reference_text: str, transcription: str) -> AnalysisResult:
        """
        참조 문장과 인식 결과를 분석

        Args:
            reference_text: 참조 문장
            transcription: 음성 인식 결과

        Returns:
            AnalysisResult (정확도, 문제 목록, 팁)
        """
        issues = self.analyze_pronunciation_issues(reference_text, transcription)
        accuracy_score = self.calculate_overall_accuracy(reference_text, transcription)
        tips = self.get_pronunciation_tips(issues)

        logger.info(
            f"발음 분석 완료 - 정렬: {self.alignment_mode}, 정확도: {accuracy_score}%, "
            f"문제: {len(issues)}개, 팁: {len(tips)}개"
        )
        return AnalysisResult(accuracy_score=accuracy_score, issues=issues, tips=tips)


# 위치 기반 정렬을 사용하는 기본 분석기
_default_analyzer = PronunciationAnalyzer({"alignment_mode": "positional"})


def calculate_phoneme_accuracy(expected: str, actual: str) -> int:
    return _default_analyzer.calculate_phoneme_accuracy(expected, actual)


def classify_issue(expected: str, actual: str) -> str:
    return _default_analyzer.classify_issue(expected, actual)


def analyze_pronunciation_issues(expected: str, actual: str) -> List[PronunciationIssue]:
    return _default_analyzer.analyze_pronunciation_issues(expected, actual)


def calculate_overall_accuracy(expected: str, actual: str) -> int:
    return _default_analyzer.calculate_overall_accuracy(expected, actual)


def get_pronunciation_tips(issues: Iterable[Union[PronunciationIssue, Dict[str, Any]]]) -> List[str]:
    return _default_analyzer.get_pronunciation_tips(issues)
