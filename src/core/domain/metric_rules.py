"""기본 지표 판별 규칙.

규칙 순서가 곧 우선순위다. 여러 지표에 걸칠 수 있는 라벨은 먼저 나오는 지표로 판별되므로
순서를 바꾸면 추출 결과가 달라진다.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from core.domain.models.financial_metric import CanonicalMetric, MetricRule


# 사업 구성 섹션 표식 (모든 지표 규칙보다 우선)
COMPOSITION_PHRASES: Tuple[str, ...] = ("主营业务构成", "Business Composition")


DEFAULT_METRIC_RULES: Mapping[CanonicalMetric, MetricRule] = MappingProxyType({
    CanonicalMetric.REVENUE: MetricRule(
        positive=("营业总收入", "营业收入", "Total Revenue", "Operating Revenue", "Revenue",
                  "Main Business Income", "营收", "主营业务收入"),
        negative=("成本", "Cost", "Expense", "费用", "增长率", "Growth", "Cash", "现金",
                  "税", "Tax", "率", "Ratio"),
    ),
    CanonicalMetric.NET_PROFIT_PARENT: MetricRule(
        positive=("归属于母公司所有者的净利润", "归属于母公司股东的净利润", "归母净利润",
                  "Net Profit Attributable to Owners", "Net Income Attributable", "Net Profit Parent",
                  "归属于上市公司股东的净利润", "净利润", "Net Profit", "Net Income"),
        negative=("扣非", "Non-recurring", "税前", "Before Tax", "增长率", "Growth", "Rate", "率",
                  "少数", "Minority", "Non-controlling", "扣除", "非经常性", "持续经营", "终止经营",
                  "Continuing", "Discontinued", "Margin"),
    ),
    CanonicalMetric.TOTAL_ASSETS: MetricRule(
        positive=("资产总计", "资产总额", "Total Assets", "总资产"),
        negative=("平均", "Average", "净资产", "Net Assets", "流动", "Current", "非流动", "Non-current",
                  "周转", "Turnover", "收益", "Return", "增长", "Growth", "Depreciation", "折旧",
                  "率", "Ratio"),
    ),
    CanonicalMetric.EQUITY_PARENT: MetricRule(
        positive=("归属于母公司所有者权益", "归属于母公司股东权益", "归母权益", "归属于母公司股东的权益",
                  "Total Equity Attributable to Owners", "Equity Attributable to Parent",
                  "归属于上市公司股东的所有者权益", "股东权益合计", "所有者权益合计", "Total Equity"),
        negative=("少数", "Minority", "平均", "Average", "增长", "Growth", "率", "Ratio",
                  "负债", "Liabilities"),
    ),
    CanonicalMetric.OPERATING_CASH_FLOW: MetricRule(
        positive=("经营活动产生的现金流量净额", "经营活动现金流量净额", "经营活动净现金流",
                  "Net Cash Flow from Operating Activities", "Net Cash from Operating",
                  "Operating Cash Flow", "OCF", "经营现金流", "经营性现金流"),
        negative=("投资", "Investing", "筹资", "Financing", "增长", "Growth", "率", "Ratio"),
    ),
    CanonicalMetric.CAPEX: MetricRule(
        positive=("购建固定资产", "购建固定资产、无形资产和其他长期资产支付的现金", "Capital Expenditure",
                  "Capex", "Capital Spending", "Purchase of Property", "资本开支", "资本性支出"),
        negative=("Ratio", "率"),
    ),
    CanonicalMetric.COST_OF_REVENUE: MetricRule(
        positive=("营业成本", "营业总成本", "Cost of Revenue", "Operating Cost", "Cost of Sales",
                  "主营业务成本"),
        negative=("率", "Ratio", "Growth", "增长"),
    ),
    CanonicalMetric.SALES_EXPENSES: MetricRule(
        positive=("销售费用", "Selling Expenses", "Distribution Costs", "Marketing Expenses"),
        negative=("率", "Ratio"),
    ),
    CanonicalMetric.MANAGEMENT_EXPENSES: MetricRule(
        positive=("管理费用", "Management Expenses", "Administrative Expenses", "General and Administrative"),
        negative=("率", "Ratio"),
    ),
    CanonicalMetric.FINANCIAL_EXPENSES: MetricRule(
        positive=("财务费用", "Financial Expenses", "Finance Costs", "Interest Expense"),
        negative=("率", "Ratio"),
    ),
    CanonicalMetric.RESEARCH_EXPENSES: MetricRule(
        positive=("研发费用", "Research and Development", "R&D"),
        negative=("率", "Ratio"),
    ),
    CanonicalMetric.TAX_EXPENSES: MetricRule(
        positive=("所得税费用", "所得税", "Income Tax Expenses", "Income Tax"),
        negative=("递延", "Deferred", "Payable", "应交", "率", "Ratio"),
    ),
})
