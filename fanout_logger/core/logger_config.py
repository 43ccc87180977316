"""
Logger configuration management
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from fanout_logger.core.log_entry import LogEntry
from fanout_logger.core.log_level import LogLevel
from fanout_logger.transports.base_transport import is_transport

Formatter = Callable[[LogEntry], str]
Filter = Callable[[LogEntry], bool]


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    The transports list may change over the logger's lifetime; everything
    else is normally fixed once the logger is built.
    """

    # Gate
    min_level: LogLevel = LogLevel.INFO

    # Output
    transports: List[Any] = field(default_factory=list)

    # Enrichment
    default_context: Dict[str, Any] = field(default_factory=dict)

    # Rendering and selection
    formatter: Optional[Formatter] = None
    filters: List[Filter] = field(default_factory=list)

    # Diagnostics
    name: str = "logger"

    # Report shutdown hook failures instead of raising them
    isolate_shutdown_errors: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.min_level, str):
            self.min_level = LogLevel.from_string(self.min_level)
        if not isinstance(self.min_level, LogLevel):
            raise TypeError("min_level must be LogLevel enum or level name")
        if self.default_context is None:
            self.default_context = {}
        if self.formatter is not None and not callable(self.formatter):
            raise TypeError("formatter must be callable")
        for log_filter in self.filters:
            if not callable(log_filter):
                raise TypeError(f"filter {log_filter!r} is not callable")
        for transport in self.transports:
            if not is_transport(transport):
                raise TypeError(f"transport {transport!r} has no write() method")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(min_level=LogLevel.DEBUG)

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            min_level=LogLevel.WARN,
            isolate_shutdown_errors=True,
        )
