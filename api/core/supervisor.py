"""
Top-level process supervisor.

Runs the uvicorn server inside an asyncio loop whose exception handler treats
any unhandled async failure (a task exception nobody retrieved, a failing
callback) as fatal: it is logged, the server is asked to shut down, and
`serve()` reports a non-zero exit status for the caller to pass to sys.exit().
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class Server(Protocol):
    should_exit: bool

    async def serve(self) -> None: ...


class Supervisor:
    def __init__(self, server: Server) -> None:
        self.server = server
        self.failure: BaseException | None = None

    @property
    def failed(self) -> bool:
        return self.failure is not None

    def handle_exception(self, loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
        exc = context.get("exception")
        message = context.get("message") or "Unhandled exception in event loop"
        logger.critical("unhandled_async_failure message=%s", message, exc_info=exc)

        if self.failure is None:
            self.failure = exc if isinstance(exc, BaseException) else RuntimeError(message)
        self.server.should_exit = True

    async def serve(self) -> int:
        asyncio.get_running_loop().set_exception_handler(self.handle_exception)
        await self.server.serve()
        if self.failed:
            logger.critical("process_exiting exit_code=%s", EXIT_FAILURE)
            return EXIT_FAILURE
        return EXIT_OK
