"""셀 값 정규화 유틸리티."""

import logging
import math
import re
from datetime import date, datetime
from numbers import Real
from typing import List, Optional, Union

from core.domain.models.year_record import BusinessCompositionItem

logger = logging.getLogger(__name__)

# 시트 경계에서 들어오는 셀 값
Cell = Union[str, int, float, bool, None, date, datetime]

_STRIP_PATTERN = re.compile(r"[¥$£€,\s\ufeff\xa0]")
_NUMBER_PREFIX = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_COMPOSITION_ITEM_SEP = re.compile(r"[;；]")
_COMPOSITION_NAME_SEP = re.compile(r"[:：]")
_LEADING_YEAR = re.compile(r"^([0-9]{4})")
_LEADING_CENTURY_YEAR = re.compile(r"^(?:19|20)[0-9]{2}")
_ANY_YEAR = re.compile(r"([0-9]{4})")
_ZERO_TOKENS = ("-", "—", "")


class CellParser:
    """스프레드시트 셀 값을 숫자/텍스트로 정규화하는 파서.

    모든 메서드는 상태가 없고 예외를 던지지 않는다.
    """

    @staticmethod
    def cell_text(cell: Cell) -> str:
        """셀 값을 문자열로 변환.

        정수값 float(2021.0)는 "2021"로, 빈 셀(None/NaN)은 ""로 변환한다.
        """
        if cell is None:
            return ""
        if isinstance(cell, float):
            if math.isnan(cell):
                return ""
            if cell.is_integer():
                return str(int(cell))
        return str(cell)

    @staticmethod
    def normalize(cell: Cell) -> float:
        """셀 값을 숫자로 변환.

        - 숫자: 그대로 반환
        - "(500)" → -500 (회계식 음수 표기)
        - "12.5%" → 0.125
        - "-", "—", "" → 0
        - 통화기호/천단위 구분자/공백 제거
        - 해석 불가 값, None, bool 등 → 0

        Args:
            cell: 원본 셀 값

        Returns:
            정규화된 숫자
        """
        if isinstance(cell, bool):
            return 0.0
        if isinstance(cell, Real):
            return float(cell)
        if not isinstance(cell, str):
            return 0.0

        text = _STRIP_PATTERN.sub("", cell).strip()

        if text.startswith("(") and text.endswith(")"):
            text = "-" + text[1:-1]

        if text.endswith("%"):
            parsed = CellParser._parse_number_prefix(text[:-1])
            return parsed / 100 if parsed is not None else 0.0

        if text in _ZERO_TOKENS:
            return 0.0

        parsed = CellParser._parse_number_prefix(text)
        return parsed if parsed is not None else 0.0

    @staticmethod
    def _parse_number_prefix(text: str) -> Optional[float]:
        """문자열 앞부분의 숫자를 해석 (예: "1000元" → 1000)."""
        match = _NUMBER_PREFIX.match(text)
        if not match:
            return None
        try:
            return float(match.group(0))
        except ValueError:
            return None

    @staticmethod
    def parse_composition(text: Cell) -> List[BusinessCompositionItem]:
        """``名称:值; 名称:值`` 형식의 사업 구성 문자열을 파싱.

        구분자가 없는 조각, 이름이 비었거나 값이 유한하지 않은 항목은 버린다.
        예상치 못한 오류 시 빈 리스트를 반환한다.
        """
        if not text or not isinstance(text, str):
            return []
        try:
            items = []
            for fragment in _COMPOSITION_ITEM_SEP.split(text):
                parts = _COMPOSITION_NAME_SEP.split(fragment, maxsplit=1)
                if len(parts) < 2:
                    continue
                name = parts[0].strip()
                value = CellParser.normalize(parts[1])
                if name and math.isfinite(value):
                    items.append(BusinessCompositionItem(name=name, value=value))
            return items
        except Exception as e:
            logger.debug(f"사업 구성 파싱 실패: {text!r} ({e})")
            return []

    @staticmethod
    def is_year_like(text: str) -> bool:
        """19xx/20xx 로 시작하는지 확인."""
        return bool(_LEADING_CENTURY_YEAR.match(text.strip()))

    @staticmethod
    def leading_year(text: str) -> Optional[str]:
        """문자열 맨 앞의 4자리 숫자를 연도로 추출."""
        match = _LEADING_YEAR.match(text.strip())
        return match.group(1) if match else None

    @staticmethod
    def header_year(text: str) -> Optional[str]:
        """가로형 헤더 셀에서 연도 추출 (예: "2023年度" → "2023", "FY2022" → "2022").

        "20" 또는 "19"를 포함하는 셀에서 처음 나오는 4자리 숫자를 사용한다.
        """
        text = text.strip()
        if "20" not in text and "19" not in text:
            return None
        match = _ANY_YEAR.search(text)
        return match.group(1) if match else None
