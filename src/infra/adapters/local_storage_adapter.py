"""로컬 파일 시스템 저장 어댑터."""

import unicodedata
from pathlib import Path
from typing import Dict
import pandas as pd

from core.ports.storage_port import StoragePort


class LocalStorageAdapter(StoragePort):
    """추출 결과를 로컬 엑셀 파일로 저장하는 어댑터.

    - pandas + openpyxl을 사용한 엑셀 파일 생성
    - 단일 파일에 다중 시트 저장 지원
    - 한자/한글 등 전각 문자 폭을 고려한 열 너비 자동 조정
    """

    # 엑셀 시트명 최대 길이
    MAX_SHEET_NAME = 31

    def __init__(self, ensure_dir: bool = True):
        """초기화.

        Args:
            ensure_dir: True이면 저장 전 디렉터리 자동 생성
        """
        self._ensure_dir = ensure_dir

    def save_excel_with_sheets(
        self,
        dataframes: Dict[str, pd.DataFrame],
        file_path: str,
        index: bool = True
    ) -> None:
        if self._ensure_dir:
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)

        with pd.ExcelWriter(file_path, engine='openpyxl') as writer:
            for sheet_name, df in dataframes.items():
                df.to_excel(writer, sheet_name=sheet_name[:self.MAX_SHEET_NAME], index=index)

            # bestfit
            for worksheet in writer.sheets.values():
                for column_cells in worksheet.iter_cols():
                    max_length = max(self._display_width(cell.value) for cell in column_cells)
                    column_letter = column_cells[0].column_letter
                    worksheet.column_dimensions[column_letter].width = max_length + 2

    @staticmethod
    def _display_width(value) -> int:
        """셀 표시 폭 (전각 문자는 2칸)."""
        if value is None:
            return 0
        return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in str(value))
