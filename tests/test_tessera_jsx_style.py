from __future__ import annotations

import warnings

import pytest

from tessera.jsx import DEFAULT_STYLE_PRESETS, Style, StyleWarning, el, resolve_style, resolve_tw, style_to_css
from tessera.jsx.style import normalize_prop_name


def test_resolve_style_looks_up_preset_by_tag_only() -> None:
    preset, style = resolve_style(el("h2", "x", id="ignored"), DEFAULT_STYLE_PRESETS)
    assert preset is DEFAULT_STYLE_PRESETS["h2"]
    assert style is None


def test_resolve_style_without_presets() -> None:
    assert resolve_style(el("h1", "x", style={"color": "red"}), None) == (None, {"color": "red"})


def test_resolve_style_keeps_inline_map_verbatim() -> None:
    inline = {"WebkitTextStroke": "1px red", "fontSize": 12}
    preset, style = resolve_style(el("p", "x", style=inline), DEFAULT_STYLE_PRESETS)
    assert preset == DEFAULT_STYLE_PRESETS["p"]
    assert style is inline


def test_resolve_style_treats_empty_map_as_absent() -> None:
    assert resolve_style(el("div", style={}), {}) == (None, None)


def test_resolve_style_ignores_non_mapping_style_with_warning() -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = resolve_style(el("div", style="color: red"), None)
    assert result == (None, None)
    assert any(isinstance(w.message, StyleWarning) for w in caught)


def test_resolve_style_skips_presets_for_non_string_tags() -> None:
    def widget(props):
        return None

    assert resolve_style(el(widget), {"widget": {"color": "red"}}) == (None, None)


def test_resolve_tw_reads_configured_prop() -> None:
    node = el("div", tw="p-4", className="m-2")
    assert resolve_tw(node) == "p-4"
    assert resolve_tw(node, "className") == "m-2"
    assert resolve_tw(node, "missing") is None


def test_resolve_tw_never_coerces_non_strings() -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        assert resolve_tw(el("div", tw=42)) is None
    assert any(isinstance(w.message, StyleWarning) for w in caught)


def test_resolve_tw_none_is_silent() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert resolve_tw(el("div", tw=None)) is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("fontSize", "font-size"),
        ("font_size", "font-size"),
        ("WebkitTextStroke", "-webkit-text-stroke"),
        ("msTransform", "-ms-transform"),
        ("--brand-color", "--brand-color"),
        ("border-Width", "border-width"),
        ("  ", ""),
    ],
)
def test_normalize_prop_name(raw: str, expected: str) -> None:
    assert normalize_prop_name(raw) == expected


def test_style_to_css_orders_and_overrides() -> None:
    css = style_to_css([{"color": "red"}, "font-weight: 600;", {"color": "blue"}])
    assert css == "font-weight:600;color:blue"


def test_style_to_css_passthrough_and_empty() -> None:
    assert style_to_css("  fill: red  ") == "fill: red"
    assert style_to_css(None) == ""
    assert style_to_css({}) == ""


def test_style_bool_value_warns_and_is_skipped() -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        css = Style.from_any({"display": True, "color": "red"}).to_css(trailing_semicolon=True)
    assert css == "color:red;"
    assert any(isinstance(w.message, StyleWarning) for w in caught)
