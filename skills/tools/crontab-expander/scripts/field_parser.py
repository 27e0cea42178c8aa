#!/usr/bin/env python3
"""
Crontab Expander - Field Parser
单个字段表达式解析模块

Supported syntax for one field:
- ``*``            every value from 0 to the field's upper bound
- ``5`` / ``1,5``  single value or comma separated list, order kept
- ``1-5``          inclusive range
- ``0-30/10``      inclusive range with step
"""

import re
from typing import List, Optional

try:
    from .exceptions import (
        FieldValueError,
        NumberFormatError,
        RangeOrderError,
        RangeViolationError,
        StepValueError,
    )
    from .models import FieldExpansion, FieldSpec
    from .logger import ExpanderLogger
except ImportError:
    from exceptions import (
        FieldValueError,
        NumberFormatError,
        RangeOrderError,
        RangeViolationError,
        StepValueError,
    )
    from models import FieldExpansion, FieldSpec
    from logger import ExpanderLogger


class FieldParser:
    """Expands one schedule field into the integers it denotes.

    Sub-parsers return a ``FieldExpansion`` carrying either the values or the
    error, so callers check ``.ok`` instead of catching. ``parse_value`` is
    the raising form.
    """

    WILDCARD = "*"
    LIST_SEPARATOR = ","
    RANGE_SEPARATOR = "-"
    STEP_SEPARATOR = "/"

    # ASCII digits only; int() alone would also take "1_0", " 7" and "٣"
    INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')

    @classmethod
    def expand(
        cls,
        spec: FieldSpec,
        expression: str,
        logger: Optional[ExpanderLogger] = None
    ) -> FieldExpansion:
        """展开字段表达式

        Args:
            spec: 字段定义
            expression: 原始表达式
            logger: 可选logger，记录DEBUG级别的解析过程

        Returns:
            FieldExpansion: 成功时包含values，失败时包含error
        """
        if expression == cls.WILDCARD:
            kind = "wildcard"
            result = cls._expand_wildcard(spec, expression)
        elif cls.RANGE_SEPARATOR in expression:
            kind = "range"
            result = cls._expand_range(spec, expression)
        else:
            kind = "list"
            result = cls._expand_list(spec, expression)

        if logger is not None:
            if result.ok:
                logger.debug(
                    f"{kind} '{expression}' -> {len(result.values)} values",
                    context=spec.label
                )
            else:
                logger.debug(f"{kind} '{expression}' rejected: {result.error.message}",
                             context=spec.label)
        return result

    @classmethod
    def parse_value(cls, label: str, expression: str, max_value: int) -> str:
        """Expand and format, raising on failure.

        Returns:
            str: ``"Label: v1 v2 ..."``

        Raises:
            FieldValueError: 表达式格式错误或值超出范围
        """
        result = cls.expand(FieldSpec(label, max_value), expression)
        if not result.ok:
            raise result.error
        return result.format()

    # ========================================================================
    # Sub-parsers
    # ========================================================================

    @classmethod
    def _expand_wildcard(cls, spec: FieldSpec, expression: str) -> FieldExpansion:
        return FieldExpansion(
            spec, expression,
            values=list(range(spec.min_value, spec.max_value + 1))
        )

    @classmethod
    def _expand_list(cls, spec: FieldSpec, expression: str) -> FieldExpansion:
        values: List[int] = []
        for token in expression.split(cls.LIST_SEPARATOR):
            value = cls._parse_int(token)
            if value is None:
                return cls._failed(spec, expression, NumberFormatError(spec.label, token))
            if not spec.contains(value):
                return cls._failed(
                    spec, expression,
                    RangeViolationError(spec.label, spec.max_value, value)
                )
            values.append(value)
        return FieldExpansion(spec, expression, values=values)

    @classmethod
    def _expand_range(cls, spec: FieldSpec, expression: str) -> FieldExpansion:
        range_part, _, step_part = expression.partition(cls.STEP_SEPARATOR)

        step = 1
        if cls.STEP_SEPARATOR in expression:
            step = cls._parse_int(step_part)
            if step is None:
                return cls._failed(spec, expression, NumberFormatError(spec.label, step_part))

        start_token, _, end_token = range_part.partition(cls.RANGE_SEPARATOR)
        if not start_token and end_token:
            # leading "-" is a negative value, below the lower bound
            return cls._failed(
                spec, expression,
                RangeViolationError(spec.label, spec.max_value, cls._parse_int(range_part))
            )
        if cls.LIST_SEPARATOR in start_token or cls.LIST_SEPARATOR in end_token:
            # a list mixed with a range or a negative entry, e.g. "1,-5"
            return cls._failed(
                spec, expression,
                RangeViolationError(spec.label, spec.max_value, None)
            )
        start = cls._parse_int(start_token)
        if start is None:
            return cls._failed(spec, expression, NumberFormatError(spec.label, start_token))
        end = cls._parse_int(end_token)
        if end is None:
            return cls._failed(spec, expression, NumberFormatError(spec.label, end_token))

        for endpoint in (start, end):
            if not spec.contains(endpoint):
                return cls._failed(
                    spec, expression,
                    RangeViolationError(spec.label, spec.max_value, endpoint)
                )
        if start > end:
            return cls._failed(spec, expression, RangeOrderError(spec.label, start, end))
        if step <= 0:
            return cls._failed(spec, expression, StepValueError(spec.label, step))

        return FieldExpansion(spec, expression, values=list(range(start, end + 1, step)))

    # ========================================================================
    # Helpers
    # ========================================================================

    @classmethod
    def _parse_int(cls, token: str) -> Optional[int]:
        """Base-10 integer or None when the token is malformed"""
        if not cls.INTEGER_PATTERN.fullmatch(token):
            return None
        return int(token)

    @staticmethod
    def _failed(spec: FieldSpec, expression: str, error: FieldValueError) -> FieldExpansion:
        return FieldExpansion(spec, expression, error=error)


def expand_field(
    spec: FieldSpec,
    expression: str,
    logger: Optional[ExpanderLogger] = None
) -> FieldExpansion:
    return FieldParser.expand(spec, expression, logger)


def parse_value(label: str, expression: str, max_value: int) -> str:
    return FieldParser.parse_value(label, expression, max_value)
