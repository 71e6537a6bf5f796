"""Runnable workflow walkthroughs.

Each module exposes a ``SCENARIO`` description and an async runner that prints
it. The submodules are not imported here so ``python -m`` can run them as
``__main__`` without a second copy in ``sys.modules``; use
:mod:`hivestudio.catalog` to look scenarios up by slug.
"""

from __future__ import annotations

__all__ = [
    "ml_pipeline",
    "simple_api",
]
