#!/usr/bin/env python3
"""
Crontab Expander - Logger Module
日志系统模块

Diagnostics go to stderr (and optionally a file) so that the expanded
schedule printed on stdout stays clean.
"""

import json
import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


# ============================================================================
# Log Entry Model
# ============================================================================

@dataclass
class LogEntry:
    """日志条目"""
    timestamp: str
    level: str
    message: str
    context: str = ""
    error_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "timestamp": self.timestamp,
            "level": self.level,
            "message": self.message,
        }
        if self.context:
            result["context"] = self.context
        if self.error_type:
            result["error_type"] = self.error_type
        return result


# ============================================================================
# Expander Logger
# ============================================================================

class ExpanderLogger:
    """展开器日志系统

    Wraps a named ``logging.Logger`` with:
    - a ``[context] message`` prefix
    - a stderr console handler and an optional file handler
    - an in-memory list of entries that can be exported to JSON
    """

    LOGGER_NAME = "CrontabExpander"
    LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(
        self,
        log_level: str = "WARNING",
        log_file: Optional[str] = None
    ):
        """初始化日志系统

        Args:
            log_level: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: 日志文件路径，None则只输出到控制台
        """
        self.log_level = getattr(logging, log_level.upper(), logging.WARNING)
        self.log_file_path: Optional[str] = None
        self._log_entries: List[LogEntry] = []

        self.logger = logging.getLogger(self.LOGGER_NAME)
        self.logger.setLevel(self.log_level)
        self.logger.handlers.clear()
        self.logger.propagate = False

        formatter = logging.Formatter(self.LOG_FORMAT, self.DATE_FORMAT)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(self.log_level)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_file:
            self._setup_file_handler(log_file, formatter)

    def _setup_file_handler(self, log_file: str, formatter: logging.Formatter) -> None:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(str(log_path), encoding='utf-8', mode='a')
            file_handler.setLevel(self.log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

            self.log_file_path = str(log_path)
        except OSError as e:
            # 文件handler创建失败，只使用控制台
            self.logger.warning(f"无法创建日志文件: {e}")
            self.log_file_path = None

    # ========================================================================
    # Core Logging Methods
    # ========================================================================

    def _log(
        self,
        level: int,
        message: str,
        context: str = "",
        error: Optional[Exception] = None
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        self._log_entries.append(LogEntry(
            timestamp=datetime.now().isoformat(),
            level=logging.getLevelName(level),
            message=message,
            context=context,
            error_type=type(error).__name__ if error else None,
        ))
        log_msg = f"[{context}] {message}" if context else message
        self.logger.log(level, log_msg)

    def debug(self, message: str, context: str = "") -> None:
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, context: str = "") -> None:
        self._log(logging.INFO, message, context)

    def warning(self, message: str, context: str = "", error: Optional[Exception] = None) -> None:
        self._log(logging.WARNING, message, context, error)

    def error(self, message: str, context: str = "", error: Optional[Exception] = None) -> None:
        self._log(logging.ERROR, message, context, error)

    # ========================================================================
    # Log Export
    # ========================================================================

    def get_log_entries(self) -> List[LogEntry]:
        """获取所有日志条目"""
        return self._log_entries.copy()

    def get_error_entries(self) -> List[LogEntry]:
        return [e for e in self._log_entries if e.level in ("ERROR", "CRITICAL")]

    def export_logs_to_json(self, file_path: str) -> Optional[str]:
        """导出日志到JSON文件

        Returns:
            保存的文件路径，失败时返回None
        """
        try:
            logs_data = [entry.to_dict() for entry in self._log_entries]
            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(logs_data, f, ensure_ascii=False, indent=2)
            return file_path
        except OSError as e:
            self.logger.error(f"导出日志失败: {e}")
            return None

    def clear_logs(self) -> None:
        self._log_entries.clear()

    def close(self) -> None:
        """关闭所有handler"""
        global _default_logger
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
        if _default_logger is self:
            _default_logger = None


# ============================================================================
# Module Helpers
# ============================================================================

_default_logger: Optional[ExpanderLogger] = None


def setup_logging(log_level: str = "WARNING", log_file: Optional[str] = None) -> ExpanderLogger:
    """配置全局日志系统并返回logger"""
    global _default_logger
    if _default_logger is not None:
        _default_logger.close()
    _default_logger = ExpanderLogger(log_level=log_level, log_file=log_file)
    return _default_logger


def get_logger() -> ExpanderLogger:
    """获取全局logger，未配置时使用默认设置"""
    if _default_logger is None:
        return setup_logging()
    return _default_logger
