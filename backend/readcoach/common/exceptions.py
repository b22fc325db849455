#!/usr/bin/env python3
"""
File: exceptions.py
Description: 서비스 계층에서 사용하는 예외 클래스
"""


class ReadCoachError(Exception):
    """발음 코치 서비스 기본 예외"""


class PassageNotFoundError(ReadCoachError):
    """존재하지 않는 연습 지문을 요청한 경우"""

    def __init__(self, passage_id: str):
        self.passage_id = passage_id
        super().__init__(f"연습 지문을 찾을 수 없습니다: {passage_id}")


class UnknownScenarioError(ReadCoachError):
    """지원하지 않는 데모 시나리오를 요청한 경우"""

    def __init__(self, scenario: str):
        self.scenario = scenario
        super().__init__(f"지원하지 않는 데모 시나리오입니다: {scenario}")
