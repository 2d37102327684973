"""Tests for goalias.stats.AliasStats."""

from __future__ import annotations

from goalias.stats import AliasStats


def test_merge_adds_all_counters():
    a = AliasStats(registered=1, reused=2, escalated=3)
    b = AliasStats(registered=10, suffixed=5, hinted=2, local_skipped=1)
    a.merge(b)
    assert a == AliasStats(
        registered=11, reused=2, escalated=3, suffixed=5, hinted=2, local_skipped=1
    )


def test_total_calls():
    assert AliasStats(registered=3, reused=2, local_skipped=1).total_calls == 6


def test_format_summary():
    lines = AliasStats(registered=4, escalated=1, reused=2).format_summary()
    assert lines[0] == "--- goalias summary ---"
    assert "  registered:    4" in lines
    assert "  escalated:     1" in lines
    assert "  total:         6" in lines
