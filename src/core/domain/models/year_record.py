"""연도별 재무 레코드 모델."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from core.domain.models.financial_metric import CanonicalMetric


@dataclass(frozen=True)
class BusinessCompositionItem:
    """주요 사업 구성 항목 (예: "主营业务A:100")."""
    name: str
    value: float


@dataclass(frozen=True)
class YearRecord:
    """확정된 연도별 재무 지표.

    revenue, net_profit_parent, total_assets, equity_parent 는 값이 없으면 0으로 채워지고,
    나머지 지표는 추출되지 않았으면 None 으로 남는다.

    Attributes:
        year: 4자리 연도 문자열 (예: "2023")
        capex: 자본적 지출 (항상 절대값)
        business_composition: 사업 구성 항목
    """
    year: str
    revenue: float = 0.0
    net_profit_parent: float = 0.0
    total_assets: float = 0.0
    equity_parent: float = 0.0
    operating_cash_flow: Optional[float] = None
    capex: Optional[float] = None
    cost_of_revenue: Optional[float] = None
    sales_expenses: Optional[float] = None
    management_expenses: Optional[float] = None
    financial_expenses: Optional[float] = None
    research_expenses: Optional[float] = None
    tax_expenses: Optional[float] = None
    business_composition: Tuple[BusinessCompositionItem, ...] = field(default_factory=tuple)

    def get(self, metric: CanonicalMetric) -> Optional[float]:
        """지표 값을 조회한다."""
        return getattr(self, metric.value)


# 하나라도 있어야 최종 결과에 남는 지표
REQUIRED_ANY_METRICS = (
    CanonicalMetric.REVENUE,
    CanonicalMetric.NET_PROFIT_PARENT,
    CanonicalMetric.TOTAL_ASSETS,
)

# 값이 없으면 0으로 채우는 핵심 지표
DEFAULTED_METRICS = (
    CanonicalMetric.REVENUE,
    CanonicalMetric.NET_PROFIT_PARENT,
    CanonicalMetric.TOTAL_ASSETS,
    CanonicalMetric.EQUITY_PARENT,
)
