"""재무제표 스프레드시트 추출 총괄 서비스."""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

import pandas as pd

from core.domain.exceptions import ExtractionError
from core.domain.models.year_record import YearRecord
from core.domain.models.year_record_accumulator import YearRecordAccumulator
from core.ports.spreadsheet_reader_port import SpreadsheetReaderPort
from core.services.cell_parser import Cell
from core.services.metric_identifier import MetricIdentifier
from core.services.orientation_detector import OrientationDetector
from core.services.sheet_extractors import create_extractor

logger = logging.getLogger(__name__)


class FinancialExtractionService:
    """여러 스프레드시트 파일에서 연도별 재무 지표를 추출하는 서비스.

    - 파일 → 시트 순서대로 처리하며, 동일 (연도, 지표)는 나중 값이 우선
    - 시트마다 표 방향(가로/세로)을 감지해 해당 추출기 적용
    - 파일 하나라도 읽기 실패 시 전체 호출 중단 (부분 결과 없음)
    - 모든 입력 처리 후 연도별 레코드 확정 및 정렬
    """

    def __init__(
        self,
        reader_port: SpreadsheetReaderPort,
        identifier: Optional[MetricIdentifier] = None
    ):
        self._reader_port = reader_port
        self._identifier = identifier or MetricIdentifier()
        self._detector = OrientationDetector(self._identifier)

    def extract(self, file_paths: Sequence[Union[str, Path]]) -> List[YearRecord]:
        """파일 목록에서 연도별 재무 레코드를 추출합니다.

        Args:
            file_paths: 입력 파일 경로 목록 (처리 순서 = 우선순위 오름차순)

        Returns:
            연도 오름차순 YearRecord 리스트 (추출 결과가 없으면 빈 리스트)

        Raises:
            ExtractionError: 파일을 열거나 파싱할 수 없는 경우
        """
        accumulator = YearRecordAccumulator()
        total_files = len(file_paths)

        for idx, file_path in enumerate(file_paths, 1):
            logger.info(f"[{idx}/{total_files}] {Path(file_path).name} 처리 중...")
            accumulator.merge(self._process_file(file_path))

        records = accumulator.finalize()
        logger.info(f"추출 완료: {len(records)}개 연도 ({total_files}개 파일)")
        return records

    def _process_file(self, file_path: Union[str, Path]) -> YearRecordAccumulator:
        """단일 파일의 모든 시트를 처리해 파일 단위 누적기 반환."""
        file_name = Path(file_path).name
        file_accumulator = YearRecordAccumulator()
        try:
            sheets = self._reader_port.read_sheets(str(file_path))
            for sheet_name, df in sheets.items():
                self.process_rows(self._to_rows(df), file_accumulator, sheet_name=f"{file_name}/{sheet_name}")
        except Exception as e:
            logger.error(f"파일 처리 실패: {file_name} ({e})")
            raise ExtractionError(file_name, e) from e
        return file_accumulator

    def process_rows(
        self,
        rows: Sequence[Sequence[Cell]],
        accumulator: YearRecordAccumulator,
        sheet_name: str = ""
    ) -> None:
        """한 시트의 행 데이터를 누적기에 반영합니다.

        방향을 감지하지 못한 시트는 조용히 건너뜁니다.
        """
        if not rows:
            return

        detection = self._detector.detect(rows)
        if not detection.detected:
            logger.debug(f"{sheet_name}: 표 방향을 감지하지 못해 건너뜀")
            return

        logger.debug(
            f"{sheet_name}: {detection.orientation.value} 방향, 헤더 행 {detection.header_row_index}"
        )
        extractor = create_extractor(detection.orientation, self._identifier)
        extractor.extract(rows, detection.header_row_index, accumulator)

    def extract_rows(self, rows: Sequence[Sequence[Cell]]) -> List[YearRecord]:
        """단일 시트 행 데이터에서 바로 레코드 추출 (파일 없이 사용)."""
        accumulator = YearRecordAccumulator()
        self.process_rows(rows, accumulator)
        return accumulator.finalize()

    @staticmethod
    def _to_rows(df: pd.DataFrame) -> List[List[Cell]]:
        return df.values.tolist()
