"""Bounded worker pool for running commands off the caller's thread."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor

from commands.boundary import CommandError, CommandRequest, CommandResponse, ImageCommandService
from config import CONFIG, EngineConfig
from utils.logger import get_logger

_logger = get_logger("executor")


class CommandExecutor:
    """Runs commands on at most ``config.execution.max_workers`` threads.

    The pool size bounds how many rasters are decoded at once, and so the peak
    memory of concurrent requests. Requests share no state, so no locking is
    needed around the service.
    """

    def __init__(self, service: ImageCommandService | None = None, config: EngineConfig = CONFIG):
        self.service = service or ImageCommandService(config)
        self.max_workers = config.execution.max_workers
        self._pool = ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="image-cmd")
        _logger.debug("CommandExecutor init: workers=%s", self.max_workers)

    def submit(
        self,
        request: CommandRequest,
        callback: Callable[[CommandResponse], None] | None = None,
    ) -> Future:
        """Queue ``request``; the returned future resolves to a CommandResponse.

        ``callback`` runs with the response once the command completes, on the
        worker thread that ran it.
        """
        future = self._pool.submit(self.service.execute, request)
        if callback is not None:
            future.add_done_callback(lambda f: self._deliver(request, f, callback))
        return future

    def _deliver(self, request: CommandRequest, future: Future,
                 callback: Callable[[CommandResponse], None]) -> None:
        try:
            response = future.result()
        except Exception as e:
            _logger.exception("command %s raised", request.command.value)
            response = CommandResponse(command=request.command, error=CommandError.from_exception(e))
        try:
            callback(response)
        except Exception:
            _logger.exception("completion callback for %s failed", request.command.value)

    def shutdown(self, wait: bool = True) -> None:
        self._pool.shutdown(wait=wait)

    def __enter__(self) -> "CommandExecutor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True)
