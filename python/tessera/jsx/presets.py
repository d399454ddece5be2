"""Default per-tag style presets.

Modified from satori's presets, which follow the Chromium user-agent
stylesheet (Source/core/css/html.css). The table is read-only; callers that
want tweaks build their own mapping, usually `{**DEFAULT_STYLE_PRESETS, ...}`.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

PresetTable = Mapping[str, Mapping[str, Any]]

_HEADING_MARGIN = {"marginLeft": 0, "marginRight": 0, "fontWeight": "bold", "display": "block"}

_PRESETS: dict[str, dict[str, Any]] = {
    "body": {"margin": 8},
    # Generic block-level elements
    "p": {"marginTop": "1em", "marginBottom": "1em", "display": "block"},
    "blockquote": {
        "marginTop": "1em",
        "marginBottom": "1em",
        "marginLeft": 40,
        "marginRight": 40,
        "display": "block",
    },
    "center": {"textAlign": "center", "display": "block"},
    "hr": {
        "marginTop": "0.5em",
        "marginBottom": "0.5em",
        "marginLeft": "auto",
        "marginRight": "auto",
        "borderWidth": 1,
        "display": "block",
    },
    # Headings
    "h1": {"fontSize": "2em", "marginTop": "0.67em", "marginBottom": "0.67em", **_HEADING_MARGIN},
    "h2": {"fontSize": "1.5em", "marginTop": "0.83em", "marginBottom": "0.83em", **_HEADING_MARGIN},
    "h3": {"fontSize": "1.17em", "marginTop": "1em", "marginBottom": "1em", **_HEADING_MARGIN},
    "h4": {"marginTop": "1.33em", "marginBottom": "1.33em", **_HEADING_MARGIN},
    "h5": {"fontSize": "0.83em", "marginTop": "1.67em", "marginBottom": "1.67em", **_HEADING_MARGIN},
    "h6": {"fontSize": "0.67em", "marginTop": "2.33em", "marginBottom": "2.33em", **_HEADING_MARGIN},
    # Inline formatting
    "u": {"textDecoration": "underline", "display": "inline"},
    "strong": {"fontWeight": "bold", "display": "inline"},
    "b": {"fontWeight": "bold", "display": "inline"},
    "i": {"fontStyle": "italic", "display": "inline"},
    "em": {"fontStyle": "italic", "display": "inline"},
    "code": {"fontFamily": "monospace", "display": "inline"},
    "kbd": {"fontFamily": "monospace", "display": "inline"},
    "pre": {"fontFamily": "monospace", "margin": "1em 0", "display": "block"},
    "mark": {"backgroundColor": "yellow", "color": 0, "display": "inline"},
    "big": {"fontSize": "1.2em", "display": "inline"},
    "small": {"fontSize": "0.8em", "display": "inline"},
    "s": {"textDecoration": "line-through", "display": "inline"},
    "span": {"display": "inline"},
    "img": {"display": "inline"},
    "svg": {"display": "inline"},
}

DEFAULT_STYLE_PRESETS: PresetTable = MappingProxyType(
    {tag: MappingProxyType(dict(styles)) for tag, styles in _PRESETS.items()}
)

# Bare text and <br> borrow the span preset.
PLAIN_TEXT_PRESET_TAG = "span"


def merge_presets(base: PresetTable, overrides: Mapping[str, Mapping[str, Any]]) -> PresetTable:
    """Return a new read-only table where each tag in `overrides` replaces the base entry."""
    merged = {tag: MappingProxyType(dict(styles)) for tag, styles in base.items()}
    for tag, styles in overrides.items():
        merged[str(tag)] = MappingProxyType(dict(styles))
    return MappingProxyType(merged)
