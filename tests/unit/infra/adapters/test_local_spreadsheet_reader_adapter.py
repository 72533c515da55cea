"""Local Spreadsheet Reader Adapter 테스트."""

from pathlib import Path

import pandas as pd
import pytest

from infra.adapters.local_spreadsheet_reader_adapter import LocalSpreadsheetReaderAdapter


@pytest.fixture
def adapter():
    return LocalSpreadsheetReaderAdapter()


def test_read_excel_all_sheets(adapter, tmp_path):
    """엑셀 파일의 모든 시트를 헤더 없이 읽기."""
    # Arrange
    file_path = tmp_path / "report.xlsx"
    with pd.ExcelWriter(file_path, engine="openpyxl") as writer:
        pd.DataFrame([["项目", 2021, 2022], ["营业收入", 1000, None]]).to_excel(
            writer, sheet_name="利润表", header=False, index=False
        )
        pd.DataFrame([["年份", "营业收入"], [2020, 800]]).to_excel(
            writer, sheet_name="摘要", header=False, index=False
        )

    # Act
    sheets = adapter.read_sheets(str(file_path))

    # Assert
    assert list(sheets) == ["利润表", "摘要"]
    rows = sheets["利润表"].values.tolist()
    assert rows[0] == ["项目", 2021, 2022]
    assert rows[1][0] == "营业收入"
    assert rows[1][2] == ""


def test_read_csv_ragged_rows(adapter, tmp_path):
    """열 개수가 다른 CSV 행은 빈 문자열로 채움."""
    file_path = tmp_path / "export.csv"
    file_path.write_text(
        "财务摘要\n"
        "年份,营业收入,资产总计\n"
        "2020,\"1,000\",5000\n",
        encoding="utf-8-sig",
    )

    sheets = adapter.read_sheets(str(file_path))

    assert list(sheets) == ["export"]
    rows = sheets["export"].values.tolist()
    assert rows[0] == ["财务摘要", "", ""]
    assert rows[1] == ["年份", "营业收入", "资产总计"]
    assert rows[2] == ["2020", "1,000", "5000"]


def test_read_csv_gbk(adapter, tmp_path):
    """UTF-8이 아닌 GBK 인코딩 CSV."""
    file_path = tmp_path / "gbk.csv"
    file_path.write_bytes("年份,营业收入\n2020,800\n".encode("gbk"))

    rows = adapter.read_sheets(str(file_path))["gbk"].values.tolist()

    assert rows[0] == ["年份", "营业收入"]


def test_read_empty_csv(adapter, tmp_path):
    file_path = tmp_path / "empty.csv"
    file_path.write_text("", encoding="utf-8")

    sheets = adapter.read_sheets(str(file_path))

    assert sheets["empty"].empty


def test_file_not_found(adapter, tmp_path):
    with pytest.raises(FileNotFoundError):
        adapter.read_sheets(str(tmp_path / "missing.xlsx"))


def test_unsupported_suffix(adapter, tmp_path):
    file_path = tmp_path / "notes.txt"
    file_path.write_text("hello", encoding="utf-8")

    with pytest.raises(ValueError):
        adapter.read_sheets(str(file_path))


def test_corrupt_excel(adapter, tmp_path):
    """엑셀 형식이 아닌 .xlsx 파일은 예외 발생."""
    file_path = tmp_path / "broken.xlsx"
    file_path.write_bytes(b"not a zip file")

    with pytest.raises(Exception):
        adapter.read_sheets(str(file_path))
