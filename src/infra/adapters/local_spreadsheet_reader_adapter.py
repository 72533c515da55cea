"""로컬 파일 시스템 스프레드시트 읽기 어댑터."""

import csv
import logging
from pathlib import Path
from typing import Dict
import pandas as pd

from core.ports.spreadsheet_reader_port import SpreadsheetReaderPort

logger = logging.getLogger(__name__)


class LocalSpreadsheetReaderAdapter(SpreadsheetReaderPort):
    """로컬 파일 시스템에서 엑셀/CSV 파일을 읽는 어댑터.

    - 엑셀(.xlsx, .xlsm): openpyxl로 모든 시트 읽기
    - CSV: 파일명(확장자 제외)을 시트명으로 하는 단일 시트
    """

    EXCEL_SUFFIXES = (".xlsx", ".xlsm")
    CSV_SUFFIXES = (".csv",)
    # 중국어 재무 데이터 CSV는 GBK로 내보내지는 경우가 많음
    CSV_ENCODINGS = ("utf-8-sig", "gbk")

    def read_sheets(self, file_path: str) -> Dict[str, pd.DataFrame]:
        """파일의 모든 시트를 읽어옵니다.

        Args:
            file_path: 읽을 파일 경로

        Returns:
            {시트명: DataFrame} 딕셔너리

        Raises:
            FileNotFoundError: 파일이 존재하지 않을 경우
            ValueError: 지원하지 않는 확장자일 경우
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"파일을 찾을 수 없습니다: {file_path}")

        suffix = path.suffix.lower()
        if suffix in self.EXCEL_SUFFIXES:
            sheets = self._read_excel(path)
        elif suffix in self.CSV_SUFFIXES:
            sheets = {path.stem: self._read_csv(path)}
        else:
            raise ValueError(f"지원하지 않는 파일 형식입니다: {path.name}")

        return {name: self._fill_empty(df) for name, df in sheets.items()}

    def _read_excel(self, path: Path) -> Dict[str, pd.DataFrame]:
        # header=None: 첫 행도 데이터로 취급 (헤더 위치는 방향 감지에서 결정)
        return pd.read_excel(path, sheet_name=None, header=None, dtype=object, engine="openpyxl")

    def _read_csv(self, path: Path) -> pd.DataFrame:
        last_error = None
        for encoding in self.CSV_ENCODINGS:
            try:
                width = self._max_csv_width(path, encoding)
                if width == 0:
                    return pd.DataFrame()
                # names 지정: 행마다 열 개수가 달라도 파싱 오류 없이 최대 폭으로 맞춤
                return pd.read_csv(
                    path,
                    header=None,
                    names=list(range(width)),
                    dtype=str,
                    keep_default_na=False,
                    skip_blank_lines=False,
                    encoding=encoding,
                )
            except UnicodeDecodeError as e:
                logger.debug(f"{path.name}: {encoding} 디코딩 실패, 다음 인코딩 시도")
                last_error = e
        raise last_error

    @staticmethod
    def _max_csv_width(path: Path, encoding: str) -> int:
        with open(path, newline="", encoding=encoding) as f:
            return max((len(row) for row in csv.reader(f)), default=0)

    @staticmethod
    def _fill_empty(df: pd.DataFrame) -> pd.DataFrame:
        """빈 셀(NaN)을 빈 문자열로 치환."""
        df = df.astype(object)
        return df.where(pd.notna(df), "")
