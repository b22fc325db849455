#!/usr/bin/env python3
"""
File: __init__.py
Description: 라우터 모듈 초기화
"""

from . import pronunciation
from . import passages
from . import history

"""
낭독 발음 코치 API 라우터

이 패키지는 발음 분석, 연습 지문, 연습 기록 API 라우터를 정의합니다.
"""
