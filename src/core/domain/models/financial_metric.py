"""재무 지표 식별 관련 도메인 모델."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class CanonicalMetric(Enum):
    """추출 대상 표준 재무 지표."""
    REVENUE = "revenue"                          # 营业收入
    NET_PROFIT_PARENT = "net_profit_parent"      # 归属于母公司所有者的净利润
    TOTAL_ASSETS = "total_assets"                # 资产总计
    EQUITY_PARENT = "equity_parent"              # 归属于母公司所有者权益
    OPERATING_CASH_FLOW = "operating_cash_flow"  # 经营活动产生的现金流量净额
    CAPEX = "capex"                              # 购建固定资产...支付的现金
    COST_OF_REVENUE = "cost_of_revenue"          # 营业成本
    SALES_EXPENSES = "sales_expenses"            # 销售费用
    MANAGEMENT_EXPENSES = "management_expenses"  # 管理费用
    FINANCIAL_EXPENSES = "financial_expenses"    # 财务费用
    RESEARCH_EXPENSES = "research_expenses"      # 研发费用
    TAX_EXPENSES = "tax_expenses"                # 所得税费用


class ColumnMarker(Enum):
    """지표가 아닌 특수 컬럼 표식."""
    BUSINESS_COMPOSITION = "business_composition"  # 主营业务构成


class TableOrientation(Enum):
    """시트의 표 방향."""
    HORIZONTAL = "horizontal"  # 연도가 열, 지표가 행
    VERTICAL = "vertical"      # 연도가 행, 지표가 열


@dataclass(frozen=True)
class MetricRule:
    """지표 판별 규칙.

    Attributes:
        positive: 하나라도 포함되면 해당 지표로 판단하는 키워드
        negative: 하나라도 포함되면 해당 지표에서 제외하는 키워드 (positive보다 먼저 평가)
    """
    positive: Tuple[str, ...]
    negative: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DetectionResult:
    """표 방향 감지 결과.

    감지 실패 시 orientation은 None, header_row_index는 -1.
    """
    orientation: Optional[TableOrientation]
    header_row_index: int = -1

    @property
    def detected(self) -> bool:
        return self.orientation is not None and self.header_row_index >= 0
