"""Simple API development with agent coordination.

Run with ``python -m hivestudio.examples.simple_api``.
"""

from __future__ import annotations

import asyncio

from ..sinks import TextSink
from ..workflows import SIMPLE_API as SCENARIO

__all__ = ["SCENARIO", "create_simple_api"]


async def create_simple_api(*, sink: TextSink | None = None) -> None:
    """Print the simple API walkthrough."""

    SCENARIO.emit(sink)


if __name__ == "__main__":
    asyncio.run(create_simple_api())
