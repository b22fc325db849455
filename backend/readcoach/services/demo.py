#!/usr/bin/env python3
"""
File: demo.py
Description: 녹음 없이 분석 결과를 보여주기 위한 모의 인식 결과 생성
"""

from readcoach.common.exceptions import UnknownScenarioError


def _perfect(passage: str) -> str:
    return passage


def _r_l_confusion(passage: str) -> str:
    return passage.replace("r", "l").replace("R", "L")


def _th_issues(passage: str) -> str:
    return passage.replace("th", "d").replace("Th", "D")


def _minor_errors(passage: str) -> str:
    return (
        passage
        .replace("revolutionized", "levolutionized", 1)
        .replace("artificial", "altificial", 1)
    )


DEMO_SCENARIOS = {
    "perfect": _perfect,
    "r_l_confusion": _r_l_confusion,
    "th_issues": _th_issues,
    "minor_errors": _minor_errors,
}


def simulate_transcription(passage: str, scenario: str) -> str:
    """
    시나리오에 따라 지문을 변형한 모의 인식 결과

    Args:
        passage: 참조 지문
        scenario: perfect / r_l_confusion / th_issues / minor_errors

    Returns:
        변형된 문자열
    """
    transform = DEMO_SCENARIOS.get(scenario)
    if transform is None:
        raise UnknownScenarioError(scenario)
    return transform(passage or "")
