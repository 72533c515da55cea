"""추출 결과 내보내기 서비스."""

import logging
from typing import Dict, List

import pandas as pd

from core.domain.models.financial_metric import CanonicalMetric
from core.domain.models.year_record import YearRecord
from core.ports.storage_port import StoragePort

logger = logging.getLogger(__name__)


class RecordExportService:
    """YearRecord 목록을 시트별 DataFrame으로 변환해 저장."""

    METRICS_SHEET = "연도별_지표"
    COMPOSITION_SHEET = "사업구성"

    def __init__(self, storage_port: StoragePort):
        self._storage_port = storage_port

    def to_dataframes(self, records: List[YearRecord]) -> Dict[str, pd.DataFrame]:
        """레코드를 시트별 DataFrame으로 변환.

        - 연도별_지표: 행=연도, 열=지표 (Wide Format)
        - 사업구성: 연도/항목명/값 (Long Format)
        """
        metric_columns = [metric.value for metric in CanonicalMetric]

        df_metrics = pd.DataFrame(
            [{"year": r.year, **{m.value: r.get(m) for m in CanonicalMetric}} for r in records],
            columns=["year"] + metric_columns,
        ).set_index("year")

        df_composition = pd.DataFrame(
            [
                {"year": r.year, "name": item.name, "value": item.value}
                for r in records
                for item in r.business_composition
            ],
            columns=["year", "name", "value"],
        ).set_index("year")

        return {
            self.METRICS_SHEET: df_metrics,
            self.COMPOSITION_SHEET: df_composition,
        }

    def export(self, records: List[YearRecord], output_path: str) -> None:
        """레코드를 엑셀 파일로 저장."""
        dataframes = self.to_dataframes(records)
        logger.info(f"결과 저장 중: {output_path} ({len(records)}개 연도)")
        self._storage_port.save_excel_with_sheets(dataframes, output_path, index=True)
