#!/usr/bin/env python3
"""
Crontab Expander - Exception Classes
自定义异常类层次结构
"""

from typing import Optional


class CrontabExpanderError(Exception):
    """Base error for everything the expander raises"""

    def __init__(self, message: str, context: str = ""):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.context:
            return f"[{self.context}] {self.message}"
        return self.message


class ArgumentCountError(CrontabExpanderError):
    """参数数量错误 - fewer than five fields plus a command were supplied"""

    def __init__(self, count: int = 0, required: int = 6):
        self.count = count
        self.required = required
        super().__init__(
            f"Number of arguments should always be {required}",
            context="参数校验"
        )


class FieldValueError(CrontabExpanderError):
    """字段错误 - base class for a schedule field that cannot be expanded

    Examples:
        - value outside the field's bounds
        - range written backwards
        - token that is not an integer
    """

    def __init__(self, message: str, label: str = ""):
        self.label = label
        super().__init__(message, context=label or "字段解析")


class RangeViolationError(FieldValueError):
    """A list value or range endpoint lies outside [0, max_value]"""

    def __init__(self, label: str, max_value: int, value: Optional[int] = None):
        self.max_value = max_value
        self.value = value
        super().__init__(f"{label} value must be between 0-{max_value}", label)


class RangeOrderError(FieldValueError):
    """A range whose beginning is larger than its end, e.g. ``3-1``"""

    def __init__(self, label: str, start: int = 0, end: int = 0):
        self.start = start
        self.end = end
        super().__init__(
            f"{label} value: Beginning of range cannot be larger than the ending",
            label
        )


class NumberFormatError(FieldValueError):
    """A token that is not a base-10 integer"""

    def __init__(self, label: str, token: str = ""):
        self.token = token
        super().__init__(f"{label} value: '{token}' is not a valid integer", label)


class StepValueError(FieldValueError):
    """A stepped range whose step is zero or negative"""

    def __init__(self, label: str, step: int = 0):
        self.step = step
        super().__init__(f"{label} value: Step must be a positive integer", label)


class ConfigurationError(CrontabExpanderError):
    """配置错误 - 当配置参数无效时抛出

    Examples:
        - empty field table
        - blank field label
        - negative upper bound
    """

    def __init__(self, message: str, param_name: str = ""):
        self.param_name = param_name
        super().__init__(message, context="配置")
