"""Logger builder pattern"""

from typing import Any, Dict, Mapping, Optional, Union

from fanout_logger.core.logger import Logger
from fanout_logger.core.logger_config import Filter, Formatter, LoggerConfig
from fanout_logger.core.log_level import LogLevel
from fanout_logger.transports.console_transport import ConsoleTransport


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._name = "logger"
        self._min_level = LogLevel.INFO
        self._context: Dict[str, Any] = {}
        self._formatter: Optional[Formatter] = None
        self._console_enabled = False
        self._console_colored = False
        self._custom_transports = []
        self._custom_filters = []
        self._isolate_shutdown_errors = False

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._name = name
        return self

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """Set minimum log level."""
        self._min_level = LogLevel.from_string(level) if isinstance(level, str) else level
        return self

    def with_context(self, context: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "LoggerBuilder":
        """
        Add default context merged into every entry.

        Repeated calls merge, later keys winning.

        Example:
            logger = (LoggerBuilder()
                .with_context({"app": "MyApp"})
                .with_context(region="eu-west-1")
                .build())
        """
        self._context.update(context or {})
        self._context.update(kwargs)
        return self

    def with_formatter(self, formatter: Formatter) -> "LoggerBuilder":
        """Replace the default text formatter."""
        self._formatter = formatter
        return self

    def with_console(self, colored: bool = False) -> "LoggerBuilder":
        """Enable console output."""
        self._console_enabled = True
        self._console_colored = colored
        return self

    def with_filter(self, log_filter: Filter) -> "LoggerBuilder":
        """
        Add a log filter.

        Args:
            log_filter: Predicate or BaseFilter instance; filters run in the
                order they were added

        Returns:
            Self for method chaining

        Example:
            from fanout_logger.filters import LevelFilter, PatternFilter

            logger = (LoggerBuilder()
                .with_filter(LevelFilter(max_level=LogLevel.ERROR))
                .with_filter(PatternFilter.excluding("password"))
                .build())
        """
        self._custom_filters.append(log_filter)
        return self

    def add_transport(self, transport: Any) -> "LoggerBuilder":
        """
        Add a custom transport.

        Args:
            transport: Transport instance

        Returns:
            Self for method chaining
        """
        self._custom_transports.append(transport)
        return self

    def with_isolated_shutdown(self, enabled: bool = True) -> "LoggerBuilder":
        """Report transport shutdown failures instead of raising them."""
        self._isolate_shutdown_errors = enabled
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        transports = []

        if self._console_enabled:
            transports.append(ConsoleTransport(colored=self._console_colored))

        transports.extend(self._custom_transports)

        config = LoggerConfig(
            name=self._name,
            min_level=self._min_level,
            transports=transports,
            default_context=dict(self._context),
            formatter=self._formatter,
            filters=list(self._custom_filters),
            isolate_shutdown_errors=self._isolate_shutdown_errors,
        )
        return Logger(config)
