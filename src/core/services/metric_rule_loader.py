"""지표 판별 규칙 설정 로더."""

import logging
import sys
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

# Python 3.11+ 사용 시 tomllib, 이하 버전은 tomli 사용
if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        raise ImportError("Python 3.10 이하에서는 'tomli' 패키지가 필요합니다. pip install tomli")

from core.domain.metric_rules import COMPOSITION_PHRASES, DEFAULT_METRIC_RULES
from core.domain.models.financial_metric import CanonicalMetric, MetricRule

logger = logging.getLogger(__name__)


class MetricRuleConfig:
    """규칙 테이블 + 사업 구성 표식 묶음 (불변)."""

    def __init__(
        self,
        rules: Mapping[CanonicalMetric, MetricRule] = DEFAULT_METRIC_RULES,
        composition_phrases: Tuple[str, ...] = COMPOSITION_PHRASES
    ):
        self.rules: Mapping[CanonicalMetric, MetricRule] = MappingProxyType(dict(rules))
        self.composition_phrases: Tuple[str, ...] = tuple(composition_phrases)


def load_metric_rules(config_path: Optional[Union[str, Path]] = None) -> MetricRuleConfig:
    """TOML 설정 파일에서 규칙을 로드한다.

    파일 형식::

        [composition]
        phrases = ["主营业务构成", "Business Composition"]

        [metric_rules.revenue]
        positive = ["营业收入", "Revenue"]
        negative = ["成本", "率"]

    ``metric_rules`` 하위 테이블의 순서가 판별 우선순위가 된다.

    Args:
        config_path: 설정 파일 경로. None이면 내장 기본 규칙 사용

    Returns:
        MetricRuleConfig

    Raises:
        FileNotFoundError: 설정 파일이 존재하지 않을 경우
        ValueError: 알 수 없는 지표명이거나 형식이 잘못된 경우
    """
    if config_path is None:
        return MetricRuleConfig()

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"규칙 설정 파일을 찾을 수 없습니다: {path}")

    with open(path, "rb") as f:
        config = tomllib.load(f)

    rules = _parse_rules(config.get("metric_rules", {}))
    if not rules:
        raise ValueError(f"규칙 설정 파일에 metric_rules 항목이 없습니다: {path}")

    phrases = config.get("composition", {}).get("phrases", list(COMPOSITION_PHRASES))
    logger.info(f"규칙 설정 로드: {path} ({len(rules)}개 지표)")
    return MetricRuleConfig(rules=rules, composition_phrases=tuple(phrases))


def _parse_rules(section: Dict[str, Any]) -> Dict[CanonicalMetric, MetricRule]:
    """metric_rules 섹션을 MetricRule 딕셔너리로 변환 (순서 유지)."""
    rules: Dict[CanonicalMetric, MetricRule] = {}
    for name, entry in section.items():
        try:
            metric = CanonicalMetric(name)
        except ValueError:
            raise ValueError(f"알 수 없는 지표명입니다: {name}")

        positive = entry.get("positive", [])
        if not positive:
            raise ValueError(f"'{name}' 지표에 positive 키워드가 없습니다.")
        rules[metric] = MetricRule(
            positive=tuple(positive),
            negative=tuple(entry.get("negative", []))
        )
    return rules
