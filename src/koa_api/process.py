"""Process termination that waits for buffered output."""

from __future__ import annotations

import logging
import sys
from typing import Callable, NoReturn, Sequence, TextIO

__all__ = ["OutputFlusher"]


LOGGER = logging.getLogger(__name__)


class OutputFlusher:
    """Flush the standard streams before handing control to ``terminate``.

    Output written to a pipe can be lost when the interpreter is torn down
    while buffers are still pending. :meth:`exit` drains every stream first
    and only then terminates, and it does so at most once per instance.
    """

    def __init__(
        self,
        streams: Sequence[TextIO] | None = None,
        terminate: Callable[[int | str | None], NoReturn] = sys.exit,
    ) -> None:
        self._streams = streams
        self._terminate = terminate
        self.exited = False

    @property
    def streams(self) -> tuple[TextIO, ...]:
        if self._streams is not None:
            return tuple(self._streams)
        return (sys.stdout, sys.stderr)

    def exit(self, code: int | str | None = 0) -> None:
        if self.exited:
            LOGGER.debug("ignoring repeated exit request with code %s", code)
            return
        self.exited = True

        for stream in self.streams:
            try:
                stream.write("")
                stream.flush()
            except (OSError, ValueError):
                LOGGER.debug("could not flush %r before exit", stream)

        self._terminate(code)
