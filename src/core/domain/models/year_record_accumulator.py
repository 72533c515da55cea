"""연도별 부분 레코드 누적기."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from core.domain.models.financial_metric import CanonicalMetric
from core.domain.models.year_record import (
    DEFAULTED_METRICS,
    REQUIRED_ANY_METRICS,
    BusinessCompositionItem,
    YearRecord,
)


@dataclass
class PartialYearRecord:
    """추출 중인 연도별 레코드.

    business_composition 이 None 이면 아직 어떤 시트에서도 사업 구성이 설정되지 않은 상태.
    """
    year: str
    values: Dict[CanonicalMetric, float] = field(default_factory=dict)
    business_composition: Optional[List[BusinessCompositionItem]] = None


class YearRecordAccumulator:
    """한 번의 추출 호출 동안 연도별 부분 레코드를 모으는 누적기.

    - 동일 (연도, 지표)에 대해 나중에 기록된 값이 이전 값을 덮어씀
    - 모든 입력 처리 후 finalize()로 최종 YearRecord 목록 생성
    """

    def __init__(self):
        self._records: Dict[str, PartialYearRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, year: str) -> bool:
        return year in self._records

    @property
    def years(self) -> List[str]:
        return list(self._records.keys())

    def get(self, year: str) -> Optional[PartialYearRecord]:
        return self._records.get(year)

    def touch(self, year: str) -> PartialYearRecord:
        """연도 레코드를 반환하며, 없으면 새로 생성한다."""
        record = self._records.get(year)
        if record is None:
            record = PartialYearRecord(year=year)
            self._records[year] = record
        return record

    def set_metric(self, year: str, metric: CanonicalMetric, value: float) -> None:
        """지표 값 기록 (자본적 지출은 절대값으로 저장)."""
        if metric is CanonicalMetric.CAPEX:
            value = abs(value)
        self.touch(year).values[metric] = value

    def set_composition(self, year: str, items: List[BusinessCompositionItem]) -> None:
        """사업 구성 목록을 교체한다 (병합하지 않음)."""
        self.touch(year).business_composition = list(items)

    def merge(self, other: "YearRecordAccumulator") -> None:
        """다른 누적기의 내용을 병합한다 (other 우선).

        Args:
            other: 나중에 처리된 입력의 누적기
        """
        for year, partial in other._records.items():
            target = self.touch(year)
            target.values.update(partial.values)
            if partial.business_composition is not None:
                target.business_composition = list(partial.business_composition)

    def finalize(self) -> List[YearRecord]:
        """최종 레코드 생성.

        1. 매출/귀속순이익/총자산 중 하나도 없는 연도 제거
        2. 핵심 지표 기본값(0) 채우기
        3. 연도 오름차순 정렬
        """
        results = []
        for year, partial in self._records.items():
            if not any(metric in partial.values for metric in REQUIRED_ANY_METRICS):
                continue

            values = {metric.value: value for metric, value in partial.values.items()}
            for metric in DEFAULTED_METRICS:
                values.setdefault(metric.value, 0.0)

            results.append(YearRecord(
                year=year,
                business_composition=tuple(partial.business_composition or ()),
                **values
            ))

        return sorted(results, key=lambda record: int(record.year))
