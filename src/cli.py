"""CLI 인터페이스."""

import os
import sys
import logging
from pathlib import Path
from typing import Optional, List

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from dotenv import load_dotenv

# src 디렉토리를 모듈 검색 경로에 추가
sys.path.append(str(Path(__file__).parent))

from core.domain.exceptions import ExtractionError
from core.domain.models.financial_metric import CanonicalMetric
from core.domain.models.year_record import YearRecord
from core.services.financial_extraction_service import FinancialExtractionService
from core.services.metric_identifier import MetricIdentifier
from core.services.metric_rule_loader import MetricRuleConfig, load_metric_rules
from core.services.record_export_service import RecordExportService
from infra.adapters.local_spreadsheet_reader_adapter import LocalSpreadsheetReaderAdapter
from infra.adapters.local_storage_adapter import LocalStorageAdapter

# Typer 앱 생성
app = typer.Typer(
    name="fin-extractor",
    help="재무제표 스프레드시트 연도별 지표 추출 도구",
    add_completion=False
)

# Rich console
console = Console()

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    """로깅 설정 (LOG_LEVEL 환경 변수, 기본 INFO)."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def _load_rules(rules: Optional[Path]) -> MetricRuleConfig:
    """규칙 설정 로드 (--rules > METRIC_RULES_PATH > 내장 기본값)."""
    rules_path = rules or os.getenv("METRIC_RULES_PATH")
    return load_metric_rules(rules_path)


@app.command()
def extract(
    files: List[Path] = typer.Argument(..., help="입력 파일 (.xlsx, .xlsm, .csv), 나중 파일 값이 우선"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="결과 엑셀 파일 경로"),
    rules: Optional[Path] = typer.Option(None, "--rules", "-r", help="지표 규칙 TOML 파일 경로"),
):
    """스프레드시트에서 연도별 재무 지표를 추출합니다.

    Examples:
        $ uv run fin-extractor extract data/利润表.xlsx data/资产负债表.csv
        $ uv run fin-extractor extract data/export.csv --output output/result.xlsx
    """
    load_dotenv()
    _setup_logging()

    try:
        identifier = MetricIdentifier(_load_rules(rules))
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]❌ 규칙 설정 오류: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    service = FinancialExtractionService(
        reader_port=LocalSpreadsheetReaderAdapter(),
        identifier=identifier
    )

    console.print(f"[cyan]📋 입력 파일 {len(files)}개[/cyan]")
    try:
        records = service.extract(files)
    except ExtractionError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        logger.error(f"추출 실패: {e}")
        raise typer.Exit(code=1)

    if not records:
        console.print("[yellow]⚠️  추출된 연도 데이터가 없습니다.[/yellow]")
        return

    console.print(_build_table(records))

    if output:
        RecordExportService(LocalStorageAdapter()).export(records, str(output))
        console.print(f"[green]✅ 완료! 결과 저장: {output}[/green]")


@app.command("rules")
def show_rules(
    rules: Optional[Path] = typer.Option(None, "--rules", "-r", help="지표 규칙 TOML 파일 경로"),
):
    """현재 적용되는 지표 판별 규칙을 우선순위 순서로 출력합니다."""
    load_dotenv()
    try:
        config = _load_rules(rules)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]❌ 규칙 설정 오류: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    table = Table(title="지표 판별 규칙")
    table.add_column("순위", justify="right")
    table.add_column("지표", no_wrap=True)
    table.add_column("positive")
    table.add_column("negative")
    for rank, (metric, rule) in enumerate(config.rules.items(), 1):
        table.add_row(str(rank), metric.value, ", ".join(rule.positive), ", ".join(rule.negative))
    console.print(table)
    console.print(f"사업 구성 표식: {', '.join(config.composition_phrases)}")


def _build_table(records: List[YearRecord]) -> Table:
    """추출 결과 표 (행=지표, 열=연도)."""
    table = Table(title="연도별 재무 지표")
    table.add_column("지표", no_wrap=True)
    for record in records:
        table.add_column(record.year, justify="right")

    for metric in CanonicalMetric:
        values = [record.get(metric) for record in records]
        table.add_row(metric.value, *[_format_value(v) for v in values])

    composition_counts = [str(len(record.business_composition)) for record in records]
    table.add_row("business_composition", *composition_counts)
    return table


def _format_value(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"{value:,.2f}"


if __name__ == "__main__":
    app()
