import pytest

from contrast.design.evaluator import ContrastResult
from contrast.design.theme_pairs import DEFAULT_ROLE_PAIRS, load_theme
from contrast.viewmodels.contrast_dashboard_viewmodel import (
    ContrastDashboardViewModel,
    format_verdict,
    label_color,
)


def test_format_verdict_pass_and_fail():
    assert format_verdict(ContrastResult(ratio=4.5312, passes=True)) == "PASS (4.53)"
    assert format_verdict(ContrastResult(ratio=1.4, passes=False)) == "FAIL"


def test_label_color_is_independent_of_verdict_text():
    passing = ContrastResult(ratio=21.0, passes=True)
    failing = ContrastResult(ratio=21.0, passes=False, threshold=25.0)
    assert label_color(passing) == "#FFFFFF"
    assert label_color(failing) == "#FFEB3B"
    assert format_verdict(failing) == "FAIL"


def test_rows_follow_pair_order_for_bundled_theme():
    vm = ContrastDashboardViewModel(load_theme())
    rows = vm.rows()
    assert [r.label for r in rows] == [p.label for p in DEFAULT_ROLE_PAIRS]
    first = rows[0]
    assert (first.foreground, first.background) == ("#FFFFFF", "#6750A4")
    assert first.result.passes
    assert first.verdict_text.startswith("PASS (")
    assert first.label_color == "#FFFFFF"


def test_scheme_switch_returns_new_view_model(theme_file):
    light = ContrastDashboardViewModel(load_theme(theme_file), threshold=4.5)
    dark = light.with_scheme("dark")
    assert light.scheme == "light" and dark.scheme == "dark"
    assert [r.result.passes for r in light.rows()] == [True, False]
    assert [r.result.passes for r in dark.rows()] == [False, True]


def test_threshold_override_changes_verdicts(theme_file):
    vm = ContrastDashboardViewModel(load_theme(theme_file), threshold=4.5)
    relaxed = vm.with_threshold(3.0)
    assert vm.summary()["failing"] == 1
    assert relaxed.summary() == {
        "theme": "sample",
        "scheme": "light",
        "threshold": 3.0,
        "total": 2,
        "failing": 0,
        "passing": 2,
    }
    hint = relaxed.rows()[1]
    assert hint.result.threshold == 3.0
    assert hint.verdict_text.startswith("PASS (4.4")


def test_unknown_scheme_rejected_at_construction():
    with pytest.raises(KeyError):
        ContrastDashboardViewModel(load_theme(), scheme="sepia")
