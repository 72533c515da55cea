"""FinancialExtractionService 테스트."""

from typing import Dict, List

import pandas as pd
import pytest

from core.domain.exceptions import ExtractionError
from core.domain.models.year_record import BusinessCompositionItem, YearRecord
from core.ports.spreadsheet_reader_port import SpreadsheetReaderPort
from core.services.financial_extraction_service import FinancialExtractionService


SCENARIO_A = [
    ["项目", "2021", "2022"],
    ["营业收入", "1000", "1200"],
    ["资产总计", "5000", "5500"],
]

SCENARIO_B = [
    ["年份", "营业收入", "归属于母公司所有者的净利润"],
    ["2020", "800", "80"],
    ["2021", "900", "95"],
]


class FakeReaderPort(SpreadsheetReaderPort):
    """메모리 기반 테스트용 리더."""

    def __init__(self, files: Dict[str, Dict[str, List[list]]]):
        self._files = files
        self.read_count = 0

    def read_sheets(self, file_path: str) -> Dict[str, pd.DataFrame]:
        self.read_count += 1
        if file_path not in self._files:
            raise FileNotFoundError(f"파일을 찾을 수 없습니다: {file_path}")
        return {name: pd.DataFrame(rows, dtype=object) for name, rows in self._files[file_path].items()}


def make_service(files):
    return FinancialExtractionService(reader_port=FakeReaderPort(files))


def test_scenario_horizontal():
    """가로형 시나리오: 연도별 레코드 2개, 누락 핵심 지표는 0."""
    service = make_service({"a.xlsx": {"Sheet1": SCENARIO_A}})

    records = service.extract(["a.xlsx"])

    assert records == [
        YearRecord(year="2021", revenue=1000.0, total_assets=5000.0, net_profit_parent=0.0, equity_parent=0.0),
        YearRecord(year="2022", revenue=1200.0, total_assets=5500.0, net_profit_parent=0.0, equity_parent=0.0),
    ]


def test_scenario_vertical():
    """세로형 시나리오."""
    service = make_service({"b.csv": {"b": SCENARIO_B}})

    records = service.extract(["b.csv"])

    assert [r.year for r in records] == ["2020", "2021"]
    assert records[0].revenue == 800.0
    assert records[0].net_profit_parent == 80.0
    assert records[1].revenue == 900.0
    assert records[1].net_profit_parent == 95.0
    assert all(r.total_assets == 0.0 and r.equity_parent == 0.0 for r in records)
    assert records[0].operating_cash_flow is None


def test_later_sheet_overwrites_earlier():
    """나중 시트/파일 값이 우선."""
    override = [
        ["项目", "2021", "2022"],
        ["营业收入", "1111", "1222"],
    ]
    service = make_service({
        "a.xlsx": {"first": SCENARIO_A},
        "b.xlsx": {"second": override},
    })

    records = service.extract(["a.xlsx", "b.xlsx"])

    assert records[0].revenue == 1111.0
    assert records[0].total_assets == 5000.0

    reversed_records = service.extract(["b.xlsx", "a.xlsx"])
    assert reversed_records[0].revenue == 1000.0


def test_merges_horizontal_and_vertical_sheets():
    """여러 시트의 서로 다른 지표를 연도별로 합침."""
    service = make_service({"a.xlsx": {"h": SCENARIO_A, "v": SCENARIO_B}})

    records = service.extract(["a.xlsx"])

    by_year = {r.year: r for r in records}
    assert list(by_year) == ["2020", "2021", "2022"]
    assert by_year["2021"].revenue == 900.0
    assert by_year["2021"].total_assets == 5000.0
    assert by_year["2021"].net_profit_parent == 95.0


def test_year_without_core_metric_filtered():
    """매출/순이익/총자산이 모두 없는 연도는 제외."""
    rows = [
        ["年份", "营业收入", "销售费用", "管理费用"],
        ["2020", "100", "10", "5"],
        ["2021", "", "", ""],
    ]
    expenses_only = [
        ["项目", "2019", "2020"],
        ["研发费用", "3", "4"],
    ]
    service = make_service({"a.xlsx": {"v": rows, "h": expenses_only}})

    records = service.extract(["a.xlsx"])

    # 2021: 매출 셀이 빈 문자열 → 0으로 기록되므로 유지됨, 2019: 연구개발비만 있으므로 제외
    assert [r.year for r in records] == ["2020", "2021"]
    assert records[0].research_expenses == 4.0
    assert records[1].revenue == 0.0


def test_composition_extracted():
    rows = [
        ["年份", "营业收入", "资产总计", "主营业务构成"],
        ["2022", "500", "900", "电池:300；储能:200"],
    ]
    service = make_service({"a.xlsx": {"v": rows}})

    records = service.extract(["a.xlsx"])

    assert records[0].business_composition == (
        BusinessCompositionItem("电池", 300.0),
        BusinessCompositionItem("储能", 200.0),
    )


def test_sheet_without_signal_contributes_nothing():
    rows = [
        ["说明", "2020"],
        ["营业收入", "100"],
    ]
    service = make_service({"a.xlsx": {"notes": rows}})

    assert service.extract(["a.xlsx"]) == []


def test_empty_input_returns_empty():
    service = make_service({})

    assert service.extract([]) == []


def test_empty_sheet_skipped():
    service = make_service({"a.xlsx": {"empty": [], "data": SCENARIO_A}})

    assert len(service.extract(["a.xlsx"])) == 2


def test_file_failure_aborts_whole_call():
    """파일 하나라도 실패하면 전체 중단, 파일명 포함 오류."""
    reader = FakeReaderPort({"a.xlsx": {"Sheet1": SCENARIO_A}})
    service = FinancialExtractionService(reader_port=reader)

    with pytest.raises(ExtractionError) as exc_info:
        service.extract(["a.xlsx", "data/broken.xlsx", "a.xlsx"])

    assert exc_info.value.file_name == "broken.xlsx"
    assert isinstance(exc_info.value.cause, FileNotFoundError)
    assert "broken.xlsx" in str(exc_info.value)
    # 실패 이후 파일은 읽지 않음
    assert reader.read_count == 2


def test_sheet_processing_failure_names_file(monkeypatch):
    """시트 처리 중 오류도 파일명을 담은 ExtractionError 로 변환."""
    # Arrange
    service = make_service({"data/a.xlsx": {"Sheet1": SCENARIO_A}})

    def fail(*args, **kwargs):
        raise RuntimeError("시트 처리 오류")

    monkeypatch.setattr(service, "process_rows", fail)

    # Act & Assert
    with pytest.raises(ExtractionError) as exc_info:
        service.extract(["data/a.xlsx"])

    assert exc_info.value.file_name == "a.xlsx"
    assert isinstance(exc_info.value.cause, RuntimeError)


def test_repeated_calls_are_isolated():
    """같은 입력을 반복 추출해도 결과 동일 (호출 간 상태 없음)."""
    service = make_service({"a.xlsx": {"h": SCENARIO_A}, "b.xlsx": {"v": SCENARIO_B}})

    first = service.extract(["a.xlsx", "b.xlsx"])
    second = service.extract(["a.xlsx", "b.xlsx"])
    only_b = service.extract(["b.xlsx"])

    assert first == second
    assert [r.year for r in only_b] == ["2020", "2021"]
    assert only_b[1].total_assets == 0.0


def test_extract_rows():
    service = make_service({})

    records = service.extract_rows(SCENARIO_A)

    assert [r.year for r in records] == ["2021", "2022"]
