#!/usr/bin/env python3
"""
File: similarity.py
Description: 편집 거리 기반 단어 유사도 계산
"""


def levenshtein_distance(a: str, b: str) -> int:
    """
    삽입, 삭제, 치환 비용이 모두 1인 편집 거리

    (len(b)+1) x (len(a)+1) 크기의 표를 채운다.
    """
    matrix = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    for i in range(len(b) + 1):
        matrix[i][0] = i
    for j in range(len(a) + 1):
        matrix[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = min(
                    matrix[i - 1][j - 1] + 1,  # 치환
                    matrix[i][j - 1] + 1,      # 삽입
                    matrix[i - 1][j] + 1,      # 삭제
                )

    return matrix[len(b)][len(a)]


def similarity(a: str, b: str) -> float:
    """
    두 문자열의 정규화된 유사도

    Args:
        a: 첫 번째 문자열
        b: 두 번째 문자열

    Returns:
        0.0 ~ 1.0 사이 값. 둘 다 비어 있으면 1.0, 한쪽만 비어 있으면 0.0
    """
    if not a:
        return 1.0 if not b else 0.0
    if not b:
        return 0.0

    max_len = max(len(a), len(b))
    return (max_len - levenshtein_distance(a, b)) / max_len
