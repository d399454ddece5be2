from __future__ import annotations

from pathlib import Path

import pytest

from tessera.jsx import el, forward_ref, fragment, memo, serialize_svg


FIXTURE_DIR = Path(__file__).parent / "fixtures" / "tessera_jsx"


def _fixture(name: str) -> str:
    return (FIXTURE_DIR / name).read_text(encoding="utf-8")


def test_serialize_svg_logo_snapshot() -> None:
    logo = el(
        "svg",
        el("title", "Logo"),
        el("circle", cx="90", cy="90", r="86", fill="url(#logo-iconGradient)"),
        el(
            "defs",
            el(
                "filter",
                el(
                    "feDropShadow",
                    dx="0",
                    dy="0",
                    stdDeviation="4",
                    floodColor="white",
                    floodOpacity="1",
                ),
                id="logo-shadow",
                colorInterpolationFilters="sRGB",
            ),
            el(
                "linearGradient",
                el("stop", offset="45%", stopColor="black"),
                el("stop", offset="100%", stopColor="white"),
                id="logo-iconGradient",
                gradientTransform="rotate(45)",
            ),
        ),
        width="60",
        height="60",
        viewBox="0 0 180 180",
        filter="url(#logo-shadow)",
        xmlns="http://www.w3.org/2000/svg",
    )
    assert serialize_svg(logo) == _fixture("svg_logo.svg")


def test_serialize_svg_adds_namespace_when_missing() -> None:
    markup = serialize_svg(el("svg", el("rect", width=10, height=10)))
    assert markup == (
        '<svg xmlns="http://www.w3.org/2000/svg">'
        '<rect width="10" height="10"></rect></svg>'
    )


def test_serialize_svg_attribute_normalization() -> None:
    markup = serialize_svg(
        el(
            "svg",
            el(
                "path",
                d="M0 0L10 10",
                stroke_width=2,
                strokeLinecap="round",
                class_name="icon",
                style={"strokeOpacity": 0.5, "fill": "none"},
                hidden=True,
                disabled=False,
                key="p1",
            ),
            el("use", xlinkHref="#a"),
            xmlnsXlink="http://www.w3.org/1999/xlink",
            preserveAspectRatio="xMidYMid meet",
        )
    )
    assert markup == (
        '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" '
        'preserveAspectRatio="xMidYMid meet">'
        '<path d="M0 0L10 10" stroke-width="2" stroke-linecap="round" class="icon" '
        'style="stroke-opacity:0.5;fill:none" hidden></path>'
        '<use xlink:href="#a"></use></svg>'
    )


def test_serialize_svg_escapes_text_and_attributes() -> None:
    markup = serialize_svg(el("svg", el("text", "a < b & c", title='say "hi"'), xmlns="x"))
    assert markup == '<svg xmlns="x"><text title="say &quot;hi&quot;">a &lt; b &amp; c</text></svg>'


def test_serialize_svg_expands_components_and_fragments() -> None:
    def dot(props):
        return el("circle", r=props["r"])

    ring = forward_ref(lambda props, ref: el("circle", r=props["r"], fill="none"))
    square = memo("rect")

    markup = serialize_svg(
        el(
            "svg",
            fragment(el(dot, r=1), [el(ring, r=2)]),
            el(square, width=3),
            None,
            xmlns="x",
        )
    )
    assert markup == (
        '<svg xmlns="x"><circle r="1"></circle><circle r="2" fill="none"></circle>'
        '<rect width="3"></rect></svg>'
    )


def test_serialize_svg_rejects_awaitable_children() -> None:
    async def later():
        return el("circle")

    pending = later()
    try:
        with pytest.raises(TypeError, match="awaitable"):
            serialize_svg(el("svg", pending))
    finally:
        pending.close()
