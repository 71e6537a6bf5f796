from __future__ import annotations

from collections.abc import Iterator

import pytest

from hivestudio import catalog


@pytest.fixture(autouse=True)
def restore_listeners() -> Iterator[None]:
    catalog._LISTENERS.clear()
    yield
    catalog._LISTENERS.clear()
