#!/usr/bin/env python3
"""
File: utils.py
Description: 발음 코치 시스템에서 공통으로 사용되는 유틸리티 함수들
"""

import math
import yaml
import logging
from typing import Dict, Any, Optional, List
import sys
from datetime import datetime

from readcoach.config import settings, resolve_backend_path

def load_config(config_path: str, default_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    YAML 설정 파일을 로드하는 함수

    Args:
        config_path: 설정 파일 경로
        default_config: 기본 설정 (옵션)

    Returns:
        설정 사전
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as file:
            config = yaml.safe_load(file)
        logging.info(f"설정을 로드했습니다: {config_path}")
        return config
    except Exception as e:
        logging.error(f"설정 로드 오류: {str(e)}")
        return default_config if default_config is not None else {}

def setup_logger(name: str, log_file: Optional[str] = None, level=logging.INFO):
    """
    로거를 설정하고 반환합니다.

    Args:
        name: 로거 이름
        log_file: 로그 파일 이름 (상대 경로, 기본값: None)
        level: 로깅 레벨 (기본값: logging.INFO)

    Returns:
        설정된 Logger 객체
    """
    # 로거 인스턴스 생성
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 이미 핸들러가 설정되어 있으면 중복 방지를 위해 추가하지 않음
    if logger.handlers:
        return logger

    # 로그 형식 설정
    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 콘솔 핸들러 추가
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 로그 파일 핸들러 추가 (파일명이 지정된 경우)
    if log_file:
        try:
            log_dir = resolve_backend_path(getattr(settings, 'LOG_DIR', 'data/logs'))
            log_dir.mkdir(exist_ok=True, parents=True)

            # 로그 파일 경로 설정 (로그 파일에 날짜 접두사 추가)
            today = datetime.now().strftime('%Y%m%d')
            log_path = log_dir / f"{today}_{log_file}"

            file_handler = logging.FileHandler(log_path, encoding='utf-8')
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except Exception as e:
            # 로깅 설정 실패 시 콘솔에만 출력
            logger.error(f"로그 파일 설정 실패: {str(e)}")

    return logger

def normalize_word(word: Optional[str]) -> str:
    """
    단어를 비교용으로 정규화 (소문자 변환, 앞뒤 공백 제거)

    Args:
        word: 원본 단어 (None 허용)

    Returns:
        정규화된 단어
    """
    return (word or "").lower().strip()

def tokenize(text: Optional[str]) -> List[str]:
    """
    발화 문자열을 소문자 단어 목록으로 분리합니다.
    연속된 공백은 하나의 구분자로 취급합니다.

    Args:
        text: 발화 문자열 (None 허용)

    Returns:
        단어 목록
    """
    return (text or "").lower().split()

def round_half_up(value: float) -> int:
    """0 이상의 값을 사사오입하여 정수로 변환"""
    return int(math.floor(value + 0.5))
