# Crontab Expander
# 把crontab表达式展开为每个字段的具体取值

from .exceptions import (
    CrontabExpanderError,
    ArgumentCountError,
    FieldValueError,
    RangeViolationError,
    RangeOrderError,
    NumberFormatError,
    StepValueError,
    ConfigurationError,
)

from .models import (
    FieldSpec,
    FieldExpansion,
    ExpanderConfig,
    ExpansionReport,
    DEFAULT_FIELD_SPECS,
)

from .field_parser import FieldParser, expand_field, parse_value
from .logger import (
    ExpanderLogger,
    LogEntry,
    get_logger,
    setup_logging,
)
from .main import (
    CrontabExpander,
    create_argument_parser,
    create_config_from_args,
    render_report,
    main,
    __version__,
)

__all__ = [
    # Exceptions
    'CrontabExpanderError',
    'ArgumentCountError',
    'FieldValueError',
    'RangeViolationError',
    'RangeOrderError',
    'NumberFormatError',
    'StepValueError',
    'ConfigurationError',
    # Models
    'FieldSpec',
    'FieldExpansion',
    'ExpanderConfig',
    'ExpansionReport',
    'DEFAULT_FIELD_SPECS',
    # Parser
    'FieldParser',
    'expand_field',
    'parse_value',
    # Logger
    'ExpanderLogger',
    'LogEntry',
    'get_logger',
    'setup_logging',
    # Main
    'CrontabExpander',
    'create_argument_parser',
    'create_config_from_args',
    'render_report',
    'main',
]
