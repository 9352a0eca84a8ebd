"""
읽기 진행 상황(마지막 챕터와 스크롤 위치) 저장 모듈
"""

import json
import logging
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Union

from ..models.book import ReadingProgress

# 로깅 설정
logger = logging.getLogger(__name__)


class ProgressStore:
    """책 ID별 읽기 진행 상황을 JSON 파일에 저장하는 클래스"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load_all(self) -> Dict[str, ReadingProgress]:
        """
        저장된 모든 진행 상황을 읽습니다.

        Returns:
            책 ID -> 진행 상황. 파일이 없거나 손상되었으면 빈 딕셔너리
        """
        if not self.path.is_file():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"진행 상황 파일을 읽을 수 없습니다: {self.path} ({e})")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"진행 상황 파일 형식이 올바르지 않습니다: {self.path}")
            return {}

        records = {}
        for book_id, item in data.items():
            try:
                records[book_id] = ReadingProgress(
                    book_id=item["book_id"],
                    chapter_id=item["chapter_id"],
                    scroll_position=float(item["scroll_position"]),
                    last_read=item["last_read"],
                )
            except (KeyError, TypeError, ValueError):
                logger.warning(f"잘못된 진행 상황 항목을 건너뜁니다: {book_id}")

        return records

    def get(self, book_id: str) -> Optional[ReadingProgress]:
        return self.load_all().get(book_id)

    def save(
        self, book_id: str, chapter_id: str, scroll_position: float
    ) -> ReadingProgress:
        """
        진행 상황을 저장합니다.

        Args:
            book_id: 책 ID
            chapter_id: 현재 챕터 ID
            scroll_position: 스크롤 위치 (0.0 ~ 1.0)

        Returns:
            저장된 진행 상황
        """
        progress = ReadingProgress(
            book_id=book_id,
            chapter_id=chapter_id,
            scroll_position=min(max(scroll_position, 0.0), 1.0),
            last_read=datetime.now(timezone.utc).isoformat(),
        )

        records = self.load_all()
        records[book_id] = progress

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(
                {key: asdict(value) for key, value in records.items()},
                f,
                ensure_ascii=False,
                indent=2,
            )

        logger.debug(f"진행 상황 저장: {book_id} -> {chapter_id} ({progress.scroll_position:.2f})")
        return progress
