"""방향별 시트 추출기."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from core.domain.models.financial_metric import ColumnMarker, TableOrientation
from core.domain.models.year_record_accumulator import YearRecordAccumulator
from core.services.cell_parser import Cell, CellParser
from core.services.metric_identifier import MetricIdentifier, MetricMatch

logger = logging.getLogger(__name__)


class SheetExtractor(ABC):
    """헤더 행 아래의 데이터를 연도별 누적기에 기록하는 추출기."""

    def __init__(self, identifier: Optional[MetricIdentifier] = None):
        self._identifier = identifier or MetricIdentifier()

    @abstractmethod
    def extract(
        self,
        rows: Sequence[Sequence[Cell]],
        header_row_index: int,
        accumulator: YearRecordAccumulator
    ) -> None:
        """시트 데이터를 누적기에 기록.

        Args:
            rows: 시트의 행 목록
            header_row_index: 감지된 헤더 행 위치
            accumulator: 값을 기록할 누적기 (동일 연도/지표는 덮어씀)
        """
        raise NotImplementedError

    @staticmethod
    def _cell_at(row: Sequence[Cell], col_idx: int) -> Cell:
        return row[col_idx] if col_idx < len(row) else ""


class HorizontalExtractor(SheetExtractor):
    """가로형 표 추출기 (연도가 열, 지표가 행).

    사업 구성은 가로형에서 지원하지 않는다.
    """

    def extract(
        self,
        rows: Sequence[Sequence[Cell]],
        header_row_index: int,
        accumulator: YearRecordAccumulator
    ) -> None:
        year_columns = self._map_year_columns(rows[header_row_index])
        if not year_columns:
            logger.debug("가로형 헤더에서 연도 열을 찾지 못했습니다.")
            return

        for row in rows[header_row_index + 1:]:
            metric = self._identifier.identify_metric(self._row_label(row))
            if metric is None:
                continue

            for col_idx, year in year_columns.items():
                value = CellParser.normalize(self._cell_at(row, col_idx))
                accumulator.set_metric(year, metric, value)

    @staticmethod
    def _map_year_columns(header_row: Sequence[Cell]) -> Dict[int, str]:
        """헤더 행의 열 위치 → 연도 매핑."""
        year_columns = {}
        for col_idx, cell in enumerate(header_row):
            year = CellParser.header_year(CellParser.cell_text(cell))
            if year:
                year_columns[col_idx] = year
        return year_columns

    def _row_label(self, row: Sequence[Cell]) -> str:
        """행 라벨: 0번 열, 비어 있으면 1번 열."""
        label = CellParser.cell_text(self._cell_at(row, 0)).strip()
        if not label:
            label = CellParser.cell_text(self._cell_at(row, 1)).strip()
        return label


class VerticalExtractor(SheetExtractor):
    """세로형 표 추출기 (연도가 행, 지표가 열)."""

    def extract(
        self,
        rows: Sequence[Sequence[Cell]],
        header_row_index: int,
        accumulator: YearRecordAccumulator
    ) -> None:
        metric_columns = self._map_metric_columns(rows[header_row_index])

        for row in rows[header_row_index + 1:]:
            year = CellParser.leading_year(CellParser.cell_text(self._cell_at(row, 0)))
            if year is None:
                continue

            accumulator.touch(year)
            for col_idx, column in metric_columns.items():
                raw = self._cell_at(row, col_idx)
                if column is ColumnMarker.BUSINESS_COMPOSITION:
                    accumulator.set_composition(year, CellParser.parse_composition(CellParser.cell_text(raw)))
                else:
                    accumulator.set_metric(year, column, CellParser.normalize(raw))

    def _map_metric_columns(self, header_row: Sequence[Cell]) -> Dict[int, MetricMatch]:
        """헤더 행의 열 위치 → 지표/사업 구성 표식 매핑."""
        metric_columns = {}
        for col_idx, cell in enumerate(header_row):
            match = self._identifier.identify(CellParser.cell_text(cell))
            if match is not None:
                metric_columns[col_idx] = match
        return metric_columns


def create_extractor(orientation: TableOrientation, identifier: MetricIdentifier) -> SheetExtractor:
    """방향에 맞는 추출기 생성."""
    if orientation is TableOrientation.HORIZONTAL:
        return HorizontalExtractor(identifier)
    return VerticalExtractor(identifier)
