#!/usr/bin/env python3
"""
Crontab Expander - Data Models
核心数据模型和配置类
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

try:
    from .exceptions import ConfigurationError, CrontabExpanderError, FieldValueError
except ImportError:
    from exceptions import ConfigurationError, CrontabExpanderError, FieldValueError


# ============================================================================
# Field Models
# ============================================================================

@dataclass(frozen=True)
class FieldSpec:
    """One schedule position: its display label and inclusive upper bound.

    The lower bound is always 0.
    """
    label: str                         # 显示名称, e.g. "Minute"
    max_value: int                     # 上限（含）

    @property
    def min_value(self) -> int:
        return 0

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


DEFAULT_FIELD_SPECS: Tuple[FieldSpec, ...] = (
    FieldSpec("Minute", 59),
    FieldSpec("Hour", 23),
    FieldSpec("Day of the month", 30),
    FieldSpec("Month", 11),
    FieldSpec("Day of the week", 6),
)


@dataclass
class FieldExpansion:
    """Outcome of expanding one field: either values or an error, never both"""
    spec: FieldSpec                    # 字段定义
    expression: str                    # 原始表达式
    values: List[int] = field(default_factory=list)   # 展开后的值
    error: Optional[FieldValueError] = None           # 错误

    @property
    def ok(self) -> bool:
        return self.error is None

    def format(self) -> str:
        """Render as ``"Label: v1 v2 ..."``"""
        return f"{self.spec.label}:" + "".join(f" {v}" for v in self.values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.spec.label,
            "expression": self.expression,
            "values": list(self.values),
        }


# ============================================================================
# Configuration Models
# ============================================================================

@dataclass
class ExpanderConfig:
    """展开器配置"""
    field_specs: Tuple[FieldSpec, ...] = DEFAULT_FIELD_SPECS
    log_level: str = "WARNING"         # 日志级别
    log_file: Optional[str] = None     # 日志文件路径
    output_format: str = "text"        # 输出格式: text, json

    OUTPUT_FORMATS = ("text", "json")

    def validate(self) -> None:
        """Check the field table and options.

        Raises:
            ConfigurationError: 当配置无效时
        """
        if not self.field_specs:
            raise ConfigurationError("Field table must not be empty", "field_specs")
        for spec in self.field_specs:
            if not spec.label or not spec.label.strip():
                raise ConfigurationError("Field label must not be blank", "field_specs")
            if spec.max_value < 0:
                raise ConfigurationError(
                    f"{spec.label} upper bound must be non-negative, got {spec.max_value}",
                    "field_specs"
                )
        if self.output_format not in self.OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format: {self.output_format}",
                "output_format"
            )

    @property
    def required_arguments(self) -> int:
        # every field plus at least one command token
        return len(self.field_specs) + 1


# ============================================================================
# Report Models
# ============================================================================

@dataclass
class ExpansionReport:
    """Result of one full run: expanded fields plus command, or a single error"""
    fields: List[FieldExpansion] = field(default_factory=list)
    command: str = ""
    error: Optional[CrontabExpanderError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def lines(self) -> List[str]:
        if self.error is not None:
            return [self.error.message]
        return [f.format() for f in self.fields] + [self.command]

    def to_dict(self) -> Dict[str, Any]:
        if self.error is not None:
            return {"error": self.error.message}
        return {
            "fields": [f.to_dict() for f in self.fields],
            "command": self.command,
        }
