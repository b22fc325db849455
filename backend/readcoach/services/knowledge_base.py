#!/usr/bin/env python3
"""
File: knowledge_base.py
Description: 학습자가 자주 혼동하는 발음 패턴 테이블

세 가지 독립적인 패턴군을 가진다.
  - R/L 혼동 단어 쌍 (대칭, 단어 전체 일치)
  - 'th' 계열 음소 치환 집합 (트리거 부분 문자열 -> 허용되는 치환 부분 문자열)
  - 모음 혼동 단어 쌍 (대칭, 단어 전체 일치)

모든 조회는 소문자로 정규화된 두 단어에 대한 순수 함수이며,
테이블은 모듈 로드 시 한 번 생성된 뒤 변경되지 않는다.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Tuple


def _symmetric_pairs(pairs: Iterable[Tuple[str, str]]) -> FrozenSet[FrozenSet[str]]:
    return frozenset(frozenset(pair) for pair in pairs)


# R/L 혼동 (단일 문자 항목 포함)
R_L_PAIRS = _symmetric_pairs([
    ("r", "l"),
    ("red", "led"),
    ("right", "light"),
])

# TH 치환: 기대 단어에 트리거가 있고 실제 단어에 치환 문자열이 있으면 일치
TH_SUBSTITUTIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "th": ("f", "v", "d", "t", "s", "z"),
    "think": ("fink", "tink", "sink"),
    "this": ("dis", "vis"),
})

# 모음 혼동
VOWEL_PAIRS = _symmetric_pairs([
    ("sheep", "ship"),
    ("beach", "bitch"),
    ("full", "fool"),
])

# 문자(군) -> 음소 패턴. 향후 음소 기반 채점을 위한 예약 데이터로, 현재 채점에는 사용하지 않음
GRAPHEME_PHONEMES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    # 모음
    "a": ("æ", "eɪ", "ɑ", "ə"),
    "e": ("ɛ", "i", "ə"),
    "i": ("ɪ", "aɪ", "i"),
    "o": ("ɑ", "oʊ", "ɔ"),
    "u": ("ʌ", "u", "ʊ"),

    # 자음군
    "th": ("θ", "ð"),
    "sh": ("ʃ",),
    "ch": ("tʃ",),
    "ng": ("ŋ",),
    "ph": ("f",),
    "gh": ("f", "g", ""),

    # 단일 자음
    "b": ("b",), "c": ("k", "s"), "d": ("d",), "f": ("f",), "g": ("g", "dʒ"),
    "h": ("h",), "j": ("dʒ",), "k": ("k",), "l": ("l",), "m": ("m",),
    "n": ("n",), "p": ("p",), "q": ("k",), "r": ("r",), "s": ("s", "z"),
    "t": ("t",), "v": ("v",), "w": ("w",), "x": ("ks",), "y": ("j", "ɪ"), "z": ("z",),
})


@dataclass(frozen=True)
class SubstitutionKnowledgeBase:
    """발음 혼동 패턴 조회용 불변 테이블"""

    r_l_pairs: FrozenSet[FrozenSet[str]] = R_L_PAIRS
    sound_substitutions: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: TH_SUBSTITUTIONS)
    vowel_pairs: FrozenSet[FrozenSet[str]] = VOWEL_PAIRS
    grapheme_phonemes: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: GRAPHEME_PHONEMES)

    def is_r_l_confusion(self, expected: str, actual: str) -> bool:
        return frozenset((expected, actual)) in self.r_l_pairs

    def is_sound_substitution(self, expected: str, actual: str) -> bool:
        for trigger, substitutes in self.sound_substitutions.items():
            if trigger in expected and any(sub in actual for sub in substitutes):
                return True
        return False

    def is_vowel_confusion(self, expected: str, actual: str) -> bool:
        return frozenset((expected, actual)) in self.vowel_pairs

    def is_common_substitution(self, expected: str, actual: str) -> bool:
        """
        두 단어가 알려진 혼동 패턴에 해당하는지 확인

        Args:
            expected: 기대 단어 (소문자)
            actual: 실제 인식된 단어 (소문자)

        Returns:
            R/L 쌍, 음소 치환, 모음 쌍 중 하나라도 일치하면 True
        """
        return (
            self.is_r_l_confusion(expected, actual)
            or self.is_sound_substitution(expected, actual)
            or self.is_vowel_confusion(expected, actual)
        )

    def phoneme_candidates(self, grapheme: str) -> Tuple[str, ...]:
        """문자(군)에 대응하는 음소 후보 (예약 데이터 조회용)"""
        return self.grapheme_phonemes.get(grapheme.lower(), ())


# 모듈 전역 기본 인스턴스
KNOWLEDGE_BASE = SubstitutionKnowledgeBase()
