"""Unit tests for raw code conversion."""

from __future__ import annotations

import pytest

from services.conversion import celsius_to_display, raw_to_celsius, raw_to_display


def test_raw_code_is_millidegrees_celsius() -> None:
    assert raw_to_celsius(10125) == pytest.approx(10.125)


def test_display_uses_calibrated_offset() -> None:
    assert celsius_to_display(0.0) == pytest.approx(32.9)
    assert celsius_to_display(100.0) == pytest.approx(212.9)


def test_raw_to_display_example() -> None:
    assert raw_to_display(10125) == pytest.approx(51.125)
