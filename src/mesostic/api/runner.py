"""
Composition runner: runs ``compose()`` off the event loop.

Each submission is handed to a worker thread (``asyncio.to_thread``) and
awaited as a future; the engine holds no shared state, so nothing inside it
needs a lock.  The runner adds the two transport-level policies the engine
deliberately lacks:

- **admission control**: an ``asyncio.Semaphore`` bounds how many
  compositions are admitted at once; further requests wait their turn;
- **timeout**: ``asyncio.wait_for`` stops waiting after
  ``timeout_seconds`` and reports ``CompositionTimeoutError``.

A timed-out worker thread cannot be interrupted; it finishes in the
background and its result is discarded.  Its semaphore slot is released as
soon as the wait ends, so the semaphore bounds *admitted* compositions:
after repeated timeouts more than ``max_concurrency`` worker threads may
still be running.

Example::

    runner = CompositionRunner(max_concurrency=8, timeout_seconds=5.0)
    result = await runner.run(text, spine)
"""

from __future__ import annotations

import asyncio

from mesostic.core.errors import CompositionTimeoutError, SourceTooLargeError
from mesostic.core.logging import get_logger
from mesostic.core.result import Result
from mesostic.engine import Mesostic, compose

logger = get_logger(__name__)


class CompositionRunner:
    """Bounded, time-limited execution of ``compose()`` in worker threads.

    Parameters
    ----------
    max_concurrency : int
        Compositions admitted at once.  Threads abandoned by a timeout are
        not counted against this limit.
    timeout_seconds : float
        Maximum time to wait for one composition.
    max_source_chars : int | None
        Reject sources longer than this before dispatching any work.
    """

    def __init__(
        self,
        max_concurrency: int = 8,
        timeout_seconds: float = 5.0,
        max_source_chars: int | None = None,
    ) -> None:
        self._semaphore = asyncio.Semaphore(max_concurrency)
        self.max_concurrency = max_concurrency
        self.timeout_seconds = timeout_seconds
        self.max_source_chars = max_source_chars

    @property
    def saturated(self) -> bool:
        """True when every slot is taken and a new composition would wait."""
        return self._semaphore.locked()

    async def run(self, source_text: str, spine: str) -> Result[Mesostic]:
        """Compose in a worker thread.

        Raises:
            SourceTooLargeError: *source_text* exceeds ``max_source_chars``.
            CompositionTimeoutError: the worker did not finish in time.
        """
        if self.max_source_chars is not None and len(source_text) > self.max_source_chars:
            raise SourceTooLargeError(len(source_text), self.max_source_chars)

        async with self._semaphore:
            try:
                return await asyncio.wait_for(
                    asyncio.to_thread(compose, source_text, spine),
                    timeout=self.timeout_seconds,
                )
            except asyncio.TimeoutError as e:
                logger.warning("compose_timeout", timeout_seconds=self.timeout_seconds)
                raise CompositionTimeoutError(self.timeout_seconds) from e
