"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Fanout Logger - A structured asynchronous logging facade
Dispatches formatted entries to pluggable transports concurrently
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from fanout_logger.core.logger import Logger, TransportShutdownError
from fanout_logger.core.logger_builder import LoggerBuilder
from fanout_logger.core.log_entry import LogEntry
from fanout_logger.core.log_level import LogLevel
from fanout_logger.core.logger_config import LoggerConfig
from fanout_logger.transports import BaseTransport, ConsoleTransport, MemoryTransport, Transport

# Import submodules (not all classes by default)
from fanout_logger import filters
from fanout_logger import formatters
from fanout_logger import transports

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "TransportShutdownError",
    "Transport",
    "BaseTransport",
    "ConsoleTransport",
    "MemoryTransport",
    "filters",
    "formatters",
    "transports",
]
