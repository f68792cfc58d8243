import json

import pytest

from contrast.design.theme_pairs import (
    DEFAULT_ROLE_PAIRS,
    RolePair,
    ThemeValidationError,
    load_theme,
    theme_from_mapping,
)


def test_bundled_theme_loads_with_light_and_dark():
    theme = load_theme()
    assert theme.name == "baseline"
    assert theme.scheme_names() == ["light", "dark"]
    assert theme.pairs == DEFAULT_ROLE_PAIRS
    assert theme.color("light", "primary") == "#6750A4"
    assert theme.color("dark", "primary") == "#D0BCFF"


def test_bundled_theme_resolves_every_default_pair():
    theme = load_theme()
    for scheme in theme.scheme_names():
        resolved = list(theme.resolved_pairs(scheme))
        assert len(resolved) == len(DEFAULT_ROLE_PAIRS)
        for fg, bg, label in resolved:
            assert fg.startswith("#") and bg.startswith("#")
            assert label


def test_custom_pairs_and_generated_label(theme_file):
    theme = load_theme(theme_file)
    assert theme.name == "sample"
    assert theme.pairs == (
        RolePair("text", "page", "Text / Page"),
        RolePair("hint", "card", "hint / card"),
    )
    assert list(theme.resolved_pairs("light")) == [
        ("#000000", "#FFFFFF", "Text / Page"),
        ("#777777", "#FFFFFF", "hint / card"),
    ]


def test_pairs_with_missing_roles_are_skipped():
    theme = theme_from_mapping(
        {"schemes": {"light": {"onPrimary": "#FFFFFF", "primary": "#6750A4"}}}
    )
    resolved = list(theme.resolved_pairs("light"))
    assert resolved == [("#FFFFFF", "#6750A4", "On Primary / Primary")]


def test_unknown_scheme_and_role_raise_key_error():
    theme = load_theme()
    with pytest.raises(KeyError):
        theme.scheme("sepia")
    with pytest.raises(KeyError):
        theme.color("light", "nope")
    with pytest.raises(KeyError):
        list(theme.resolved_pairs("sepia"))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_theme(tmp_path / "absent.json")


def test_invalid_json_raises_validation_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ThemeValidationError):
        load_theme(path)


def test_name_defaults_to_file_stem(tmp_path):
    path = tmp_path / "ocean.json"
    path.write_text(json.dumps({"schemes": {"light": {"a": "#000000"}}}), encoding="utf-8")
    assert load_theme(path).name == "ocean"


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"schemes": {}},
        {"schemes": []},
        {"schemes": {"light": "#FFFFFF"}},
        {"schemes": {"light": {"primary": 123}}},
        {"schemes": {"light": {}}, "pairs": "onPrimary/primary"},
        {"schemes": {"light": {}}, "pairs": [["onPrimary"]]},
        {"schemes": {"light": {}}, "pairs": [["onPrimary", 1]]},
        {"schemes": {"light": {}}, "name": 5},
    ],
)
def test_malformed_themes_rejected(payload):
    with pytest.raises(ThemeValidationError):
        theme_from_mapping(payload)


def test_non_hex_color_rejected_at_load(tmp_path):
    payload = {
        "schemes": {
            "light": {"onPrimary": "#FFFFFF", "primary": "#6750A4"},
            "dark": {"onPrimary": "white", "primary": "#D0BCFF"},
        }
    }
    path = tmp_path / "named.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ThemeValidationError) as exc_info:
        load_theme(path)
    assert "dark/onPrimary" in str(exc_info.value)


def test_shorthand_hex_colors_accepted():
    theme = theme_from_mapping({"schemes": {"light": {"onPrimary": "#fff", "primary": "#000"}}})
    assert list(theme.resolved_pairs("light")) == [("#fff", "#000", "On Primary / Primary")]
