"""라벨 → 표준 지표 판별 서비스."""

from typing import Optional, Union

from core.domain.models.financial_metric import CanonicalMetric, ColumnMarker
from core.services.metric_rule_loader import MetricRuleConfig

MetricMatch = Union[CanonicalMetric, ColumnMarker]


class MetricIdentifier:
    """자유 텍스트 라벨이 어떤 표준 지표를 의미하는지 판별.

    - 사업 구성 표식이 포함되면 모든 규칙보다 우선해 BUSINESS_COMPOSITION 반환
    - 규칙 테이블 순서대로 순회: negative 키워드 포함 시 해당 지표 건너뜀,
      positive 키워드 포함 시 즉시 반환 (먼저 나온 지표가 우선)
    - 대소문자 구분 부분 문자열 매칭, 앞뒤 공백 제거 외 정규화 없음
    """

    def __init__(self, config: Optional[MetricRuleConfig] = None):
        self._config = config or MetricRuleConfig()

    @property
    def config(self) -> MetricRuleConfig:
        return self._config

    def identify(self, label: str) -> Optional[MetricMatch]:
        """라벨에 해당하는 지표 판별.

        Args:
            label: 행/열 라벨

        Returns:
            CanonicalMetric, ColumnMarker.BUSINESS_COMPOSITION, 또는 None
        """
        if not label:
            return None
        text = str(label).strip()
        if not text:
            return None

        if any(phrase in text for phrase in self._config.composition_phrases):
            return ColumnMarker.BUSINESS_COMPOSITION

        for metric, rule in self._config.rules.items():
            if any(keyword in text for keyword in rule.negative):
                continue
            if any(keyword in text for keyword in rule.positive):
                return metric
        return None

    def identify_metric(self, label: str) -> Optional[CanonicalMetric]:
        """표준 지표만 반환 (사업 구성 표식은 None 취급)."""
        match = self.identify(label)
        return match if isinstance(match, CanonicalMetric) else None
