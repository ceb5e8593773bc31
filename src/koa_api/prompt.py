"""Interactive yes/no confirmation."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TextIO

__all__ = ["AFFIRMATIVE_ANSWERS", "confirm", "is_affirmative"]


LOGGER = logging.getLogger(__name__)

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes", "ok", "true"})


def is_affirmative(answer: str) -> bool:
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


async def confirm(
    message: str,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> bool:
    """Ask ``message`` on ``stdout`` and read a single answer from ``stdin``.

    Only one line is consumed. End of input counts as a refusal.
    """

    reader = stdin if stdin is not None else sys.stdin
    writer = stdout if stdout is not None else sys.stdout

    writer.write(message)
    writer.flush()
    answer = await asyncio.to_thread(reader.readline)

    accepted = is_affirmative(answer)
    LOGGER.debug("confirmation answer %r accepted=%s", answer.strip(), accepted)
    return accepted
