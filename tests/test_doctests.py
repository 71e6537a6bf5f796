from __future__ import annotations

import doctest

import hivestudio.scenario


def test_scenario_doctests() -> None:
    failure_count, _ = doctest.testmod(
        hivestudio.scenario,
        optionflags=doctest.NORMALIZE_WHITESPACE,
    )
    assert failure_count == 0
