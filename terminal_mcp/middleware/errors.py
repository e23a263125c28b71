"""Error handling middleware for consistent error logging."""

import logging
from collections import Counter
from collections.abc import Callable
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from terminal_mcp.middleware.base import TerminalMiddleware

ErrorCallback = Callable[[Exception, MiddlewareContext], None]


class ErrorHandlingMiddleware(TerminalMiddleware):
    """Logs and counts exceptions escaping MCP handlers, then re-raises.

    Command failures never reach this layer (the executor turns them into
    results); what lands here are protocol-level errors such as unknown
    tools, invalid arguments or unknown resource URIs.

    Example:
        >>> def on_error(exc, ctx):
        ...     print(f"Error in {ctx.method}: {exc}")
        >>> server.add_middleware(ErrorHandlingMiddleware(error_callback=on_error))
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
        error_callback: ErrorCallback | None = None,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Whether to include full traceback in logs.
            error_callback: Optional callback receiving (exception, context).
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback
        self.error_callback = error_callback
        self._error_counts: Counter[str] = Counter()

    def get_error_stats(self) -> dict[str, int]:
        """Get error counts keyed by exception type name."""
        return dict(self._error_counts)

    def reset_stats(self) -> None:
        self._error_counts.clear()

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        try:
            return await call_next(context)
        except Exception as e:
            error_type = type(e).__name__
            self._error_counts[error_type] += 1

            self.logger.error(
                "Error in %s: %s: %s",
                context.method,
                error_type,
                e,
                exc_info=self.include_traceback,
            )

            if self.error_callback:
                try:
                    self.error_callback(e, context)
                except Exception as callback_error:
                    self.logger.warning(
                        "Error callback failed: %s",
                        callback_error,
                    )

            raise
