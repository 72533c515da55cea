"""시트 표 방향 감지 서비스."""

from typing import List, Optional, Sequence

from core.domain.models.financial_metric import DetectionResult, TableOrientation
from core.services.cell_parser import Cell, CellParser
from core.services.metric_identifier import MetricIdentifier


class OrientationDetector:
    """시트 상단 행을 훑어 가로형/세로형 여부와 헤더 행을 판단.

    행마다 위에서부터:
    1. 연도형 셀(19xx/20xx로 시작)이 2개 이상 → 가로형 (연도가 열)
    2. 표준 지표로 판별되는 셀이 3개 이상 → 세로형 (연도가 행)
    처음 조건을 만족한 행이 헤더가 된다.

    위 조건을 만족하는 행이 없으면, 지표 셀이 하나 이상인 행 바로 아래로 연도형 첫 셀이
    2행 이상 이어지는 경우 세로형으로 본다 (지표 열이 2개 이하인 좁은 세로형 표).
    """

    MAX_SCAN_ROWS = 30
    MIN_YEAR_CELLS = 2
    MIN_METRIC_CELLS = 3
    MIN_YEAR_ROWS = 2

    def __init__(self, identifier: Optional[MetricIdentifier] = None):
        self._identifier = identifier or MetricIdentifier()

    def detect(self, rows: Sequence[Sequence[Cell]]) -> DetectionResult:
        """표 방향과 헤더 행 위치 감지.

        Args:
            rows: 시트의 행 목록

        Returns:
            DetectionResult (감지 실패 시 orientation=None, header_row_index=-1)
        """
        scan_limit = min(len(rows), self.MAX_SCAN_ROWS)

        for row_idx in range(scan_limit):
            texts = self._row_texts(rows[row_idx])

            year_count = sum(1 for text in texts if CellParser.is_year_like(text))
            if year_count >= self.MIN_YEAR_CELLS:
                return DetectionResult(TableOrientation.HORIZONTAL, row_idx)

            if self._count_metrics(texts) >= self.MIN_METRIC_CELLS:
                return DetectionResult(TableOrientation.VERTICAL, row_idx)

        header_idx = self._find_narrow_vertical_header(rows, scan_limit)
        if header_idx is not None:
            return DetectionResult(TableOrientation.VERTICAL, header_idx)

        return DetectionResult(None, -1)

    def _find_narrow_vertical_header(self, rows: Sequence[Sequence[Cell]], scan_limit: int) -> Optional[int]:
        """좁은 세로형 표의 헤더 행 탐색."""
        for row_idx in range(scan_limit):
            if self._count_metrics(self._row_texts(rows[row_idx])) == 0:
                continue

            year_rows = 0
            for next_row in rows[row_idx + 1:]:
                first = CellParser.cell_text(next_row[0]) if len(next_row) > 0 else ""
                if not CellParser.is_year_like(first):
                    break
                year_rows += 1

            if year_rows >= self.MIN_YEAR_ROWS:
                return row_idx
        return None

    def _count_metrics(self, texts: List[str]) -> int:
        """표준 지표로 판별되는 셀 개수 (사업 구성 표식 제외)."""
        return sum(1 for text in texts if self._identifier.identify_metric(text) is not None)

    @staticmethod
    def _row_texts(row: Sequence[Cell]) -> List[str]:
        return [CellParser.cell_text(cell).strip() for cell in row]
