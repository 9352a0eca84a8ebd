"""
환경 설정 및 구성 관리
"""

import os
import logging
from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Config:
    """애플리케이션 설정 클래스"""

    # 로깅 설정
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # 책 설정
    BOOK_PATH = os.getenv("BOOK_PATH")
    CHAPTER_EXTENSION = os.getenv("CHAPTER_EXTENSION", ".md")

    # Babelfish 번역 프로젝트 설정
    MANIFEST_NAME = os.getenv("MANIFEST_NAME", "book.yaml")
    SOURCE_DIR_NAME = os.getenv("SOURCE_DIR_NAME", "source")
    TRANSLATION_DIR_NAME = os.getenv("TRANSLATION_DIR_NAME", "translated")

    # 읽기 진행 상황 저장 파일
    PROGRESS_FILE = os.getenv(
        "PROGRESS_FILE", os.path.join(os.path.expanduser("~"), ".glyph-reader.json")
    )

    @property
    def log_level(self):
        """로그 레벨 (logging 모듈 상수)"""
        return getattr(logging, self.LOG_LEVEL.upper(), logging.INFO)

    @property
    def book_path(self):
        """기본 책 디렉토리"""
        return self.BOOK_PATH

    @property
    def progress_file(self):
        """읽기 진행 상황 파일 경로"""
        return self.PROGRESS_FILE

    @classmethod
    def validate(cls):
        """설정 유효성 검사"""
        errors = []

        if cls.LOG_LEVEL.upper() not in _LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL은 {', '.join(sorted(_LOG_LEVELS))} 중 하나여야 합니다."
            )

        if not cls.CHAPTER_EXTENSION.startswith("."):
            errors.append("CHAPTER_EXTENSION은 '.'으로 시작해야 합니다.")

        if not cls.MANIFEST_NAME:
            errors.append("MANIFEST_NAME이 설정되지 않았습니다.")

        if not cls.SOURCE_DIR_NAME or not cls.TRANSLATION_DIR_NAME:
            errors.append("SOURCE_DIR_NAME과 TRANSLATION_DIR_NAME은 비어 있을 수 없습니다.")
        elif cls.SOURCE_DIR_NAME == cls.TRANSLATION_DIR_NAME:
            errors.append("SOURCE_DIR_NAME과 TRANSLATION_DIR_NAME은 달라야 합니다.")

        if not cls.PROGRESS_FILE:
            errors.append("PROGRESS_FILE이 설정되지 않았습니다.")

        return errors

    @classmethod
    def print_config(cls):
        """현재 설정을 출력합니다."""
        print("현재 설정:")
        print(f"  로그 레벨: {cls.LOG_LEVEL}")
        print(f"  기본 책 경로: {cls.BOOK_PATH or '(없음)'}")
        print(f"  챕터 확장자: {cls.CHAPTER_EXTENSION}")
        print(f"  매니페스트 파일: {cls.MANIFEST_NAME}")
        print(f"  원문 디렉토리: {cls.SOURCE_DIR_NAME}")
        print(f"  번역 디렉토리: {cls.TRANSLATION_DIR_NAME}")
        print(f"  진행 상황 파일: {cls.PROGRESS_FILE}")


def validate_config(config: Config) -> None:
    """
    설정 유효성 검사 함수

    Args:
        config: Config 인스턴스

    Raises:
        ValueError: 설정이 유효하지 않은 경우
    """
    errors = config.validate()
    if errors:
        error_message = "설정 오류가 발견되었습니다:\n" + "\n".join(
            f"  - {error}" for error in errors
        )
        raise ValueError(error_message)
