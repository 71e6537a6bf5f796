"""ML pipeline development with a specialized agent team.

Run with ``python -m hivestudio.examples.ml_pipeline``. The script only prints
the commands; nothing is spawned.
"""

from __future__ import annotations

import asyncio

from ..sinks import TextSink
from ..workflows import ML_PIPELINE as SCENARIO

__all__ = ["SCENARIO", "create_ml_pipeline"]


async def create_ml_pipeline(*, sink: TextSink | None = None) -> None:
    """Print the ML pipeline walkthrough.

    Args:
        sink: Optional line sink; defaults to standard output.
    """

    SCENARIO.emit(sink)


if __name__ == "__main__":
    asyncio.run(create_ml_pipeline())
