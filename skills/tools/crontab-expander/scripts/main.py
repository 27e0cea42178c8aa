#!/usr/bin/env python3
"""
Crontab Expander - Main Entry Point
主程序入口和命令行接口

Usage:
    python main.py 0-45/15 0 1,15 "*" 1-5 /usr/bin/find
    python main.py --format json 5 0 1 2 0 /usr/bin/sample.sh
"""

import argparse
import json
import sys
from typing import List, Optional, Sequence

# 支持相对导入和绝对导入
try:
    from .models import ExpanderConfig, ExpansionReport, FieldExpansion
    from .field_parser import FieldParser
    from .logger import ExpanderLogger, setup_logging
    from .exceptions import ArgumentCountError, ConfigurationError
except ImportError:
    from models import ExpanderConfig, ExpansionReport, FieldExpansion
    from field_parser import FieldParser
    from logger import ExpanderLogger, setup_logging
    from exceptions import ArgumentCountError, ConfigurationError


__version__ = "1.0.0"


class CrontabExpander:
    """Expands a full crontab line: five schedule fields and a command.

    Fields are expanded in table order and the first failing field stops the
    run; nothing from the other fields is reported.
    """

    COMMAND_PREFIX = "Command: "

    def __init__(self, config: Optional[ExpanderConfig] = None,
                 logger: Optional[ExpanderLogger] = None):
        self.config = config or ExpanderConfig()
        self.config.validate()
        self.logger = logger

    def validate_input(self, args: Sequence[str]) -> List[str]:
        """检查参数数量

        Raises:
            ArgumentCountError: 参数不足
        """
        arguments = list(args)
        if len(arguments) < self.config.required_arguments:
            raise ArgumentCountError(len(arguments), self.config.required_arguments)
        return arguments

    def parse_commands(self, commands: Sequence[str]) -> str:
        return (self.COMMAND_PREFIX + " ".join(commands)).strip()

    def parse_input(self, arguments: Sequence[str]) -> ExpansionReport:
        """Expand every field, stopping at the first error"""
        field_count = len(self.config.field_specs)
        expansions: List[FieldExpansion] = []

        for spec, expression in zip(self.config.field_specs, arguments[:field_count]):
            expansion = FieldParser.expand(spec, expression, self.logger)
            if not expansion.ok:
                self._log_warning(expansion.error.message, spec.label)
                return ExpansionReport(error=expansion.error)
            expansions.append(expansion)

        return ExpansionReport(
            fields=expansions,
            command=self.parse_commands(arguments[field_count:])
        )

    def run(self, args: Sequence[str]) -> ExpansionReport:
        if self.logger is not None:
            self.logger.info(f"展开 {len(args)} 个参数", context="初始化")
        try:
            arguments = self.validate_input(args)
        except ArgumentCountError as e:
            self._log_warning(f"{e.message} (got {e.count})", "参数校验")
            return ExpansionReport(error=e)

        report = self.parse_input(arguments)
        if report.ok and self.logger is not None:
            self.logger.info("展开完成", context="完成")
        return report

    def _log_warning(self, message: str, context: str) -> None:
        if self.logger is not None:
            self.logger.warning(message, context=context)


def create_argument_parser() -> argparse.ArgumentParser:
    """创建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        prog="crontab-expander",
        description="Expand a crontab line into the concrete values of each field",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  %(prog)s 0-45/15 0 1,15 "*" 1-5 /usr/bin/find
  %(prog)s 0-30/10 9-17 "*" "*" 1-5 /usr/bin/backup --full
  %(prog)s --format json 5 0 1 2 0 /usr/bin/sample.sh

Options must come before the expression; everything after the first
field is passed through untouched.
        """
    )

    parser.add_argument(
        "arguments",
        nargs=argparse.REMAINDER,
        metavar="FIELD",
        help="five schedule fields followed by the command"
    )

    parser.add_argument(
        "-f", "--format",
        dest="output_format",
        choices=ExpanderConfig.OUTPUT_FORMATS,
        default="text",
        help="输出格式，默认: text"
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        metavar="PATH",
        help="同时把日志写入文件"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="显示详细日志（DEBUG级别）"
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="静默模式（只显示错误）"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def create_config_from_args(args: argparse.Namespace) -> ExpanderConfig:
    """从命令行参数创建配置对象"""
    if args.verbose:
        log_level = "DEBUG"
    elif args.quiet:
        log_level = "ERROR"
    else:
        log_level = "WARNING"

    return ExpanderConfig(
        log_level=log_level,
        log_file=args.log_file,
        output_format=args.output_format,
    )


def render_report(report: ExpansionReport, output_format: str = "text") -> str:
    if output_format == "json":
        return json.dumps(report.to_dict(), ensure_ascii=False)
    return "\n".join(report.lines())


def main(args: Optional[List[str]] = None) -> int:
    """主函数

    Args:
        args: 命令行参数列表，None则使用sys.argv

    Returns:
        退出码 (0=成功, 1=失败)
    """
    parser = create_argument_parser()
    parsed_args = parser.parse_args(args)

    config = create_config_from_args(parsed_args)
    logger = setup_logging(config.log_level, config.log_file)

    try:
        expander = CrontabExpander(config, logger)
        report = expander.run(parsed_args.arguments)
    except ConfigurationError as e:
        logger.error(e.message, context=e.context, error=e)
        print(e.message)
        return 1
    finally:
        logger.close()

    print(render_report(report, config.output_format))
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
