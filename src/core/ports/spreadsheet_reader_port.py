"""스프레드시트 읽기를 위한 포트 인터페이스."""

from abc import ABC, abstractmethod
from typing import Dict
import pandas as pd


class SpreadsheetReaderPort(ABC):
    """스프레드시트 읽기 포트."""

    @abstractmethod
    def read_sheets(self, file_path: str) -> Dict[str, pd.DataFrame]:
        """파일의 모든 시트를 원본 그대로 읽어옵니다.

        헤더 행을 해석하지 않고(header=None) 모든 행을 데이터로 반환하며,
        빈 셀은 빈 문자열("")로 채워 열 위치가 밀리지 않도록 합니다.

        Args:
            file_path: 읽을 파일 경로 (.xlsx, .xlsm, .csv)

        Returns:
            {시트명: DataFrame} 딕셔너리 (시트 순서 유지)
        """
        raise NotImplementedError
