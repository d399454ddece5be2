from __future__ import annotations

import re
import warnings
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .core import Element
from .presets import PresetTable


class StyleWarning(UserWarning):
    """Warning emitted for suspicious style or utility-class authoring inputs."""


StyleLike = Any

_UPPER_RE = re.compile(r"([A-Z])")


def _warn(msg: str) -> None:
    warnings.warn(msg, StyleWarning, stacklevel=3)


def resolve_style(
    element: Element,
    presets: PresetTable | None,
) -> tuple[Mapping[str, Any] | None, Mapping[str, Any] | None]:
    """Return `(preset, style)` for a host element.

    The two maps stay separate; the engine applies preset, then style, then
    utility classes.
    """
    preset = None
    if presets is not None and isinstance(element.tag, str):
        preset = presets.get(element.tag)

    inline = element.props.get("style")
    style = None
    if isinstance(inline, Mapping):
        if len(inline) > 0:
            style = inline
    elif inline is not None and inline is not False:
        _warn(
            f"Ignoring non-mapping style on <{element.tag}>: {type(inline).__name__}; "
            "pass a dict of style properties"
        )
    return preset, style


def resolve_tw(element: Element, prop_name: str = "tw") -> str | None:
    if prop_name not in element.props:
        return None
    value = element.props[prop_name]
    if isinstance(value, str):
        return value
    if value is not None:
        _warn(f"Ignoring non-string {prop_name!r} value on <{element.tag}>: {value!r}")
    return None


def normalize_prop_name(name: Any) -> str:
    """Map a style key (`fontSize`, `font_size`, `WebkitTextStroke`) to its CSS name."""
    text = str(name).strip()
    if not text:
        return text
    if text.startswith("--"):
        return text
    if "-" in text:
        return text.lower()
    if text.startswith("ms") and len(text) > 2 and text[2].isupper():
        text = "-" + text
    kebab = _UPPER_RE.sub(r"-\1", text).replace("_", "-").lower()
    return kebab


def _coerce_style_value(prop: str, value: Any) -> str | None:
    if value is None or value is False:
        return None
    if isinstance(value, bool):
        _warn(f"Skipping boolean inline-style value for {prop!r}: {value!r}")
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        return " ".join(str(part) for part in value if part is not None)
    text = str(value).strip()
    if not text:
        return None
    return text


def _parse_style_string(fragment: str) -> list[tuple[str, str]]:
    out: list[tuple[str, str]] = []
    for part in str(fragment).split(";"):
        chunk = part.strip()
        if not chunk:
            continue
        name, sep, value = chunk.partition(":")
        if not sep:
            _warn(f"Ignoring malformed inline-style fragment without ':': {chunk!r}")
            continue
        prop = name.strip()
        if not prop:
            _warn(f"Ignoring inline-style fragment with empty property name: {chunk!r}")
            continue
        css_value = _coerce_style_value(prop, value)
        if css_value is None:
            continue
        out.append((prop, css_value))
    return out


@dataclass
class Style:
    """Ordered CSS declarations, used when a style map is written into markup."""

    _props: dict[str, str] = field(default_factory=dict)

    def merge(self, *fragments: Any, **props: Any) -> "Style":
        for fragment in fragments:
            self._merge_one(fragment)
        if props:
            self._merge_one(props)
        return self

    def _merge_one(self, fragment: Any) -> None:
        if fragment is None or fragment is False:
            return
        if isinstance(fragment, Style):
            for key, value in fragment.items():
                self._set_prop(key, value)
            return
        if isinstance(fragment, str):
            for key, value in _parse_style_string(fragment):
                self._set_prop(key, value)
            return
        if isinstance(fragment, Mapping):
            for raw_key, raw_value in fragment.items():
                key = normalize_prop_name(raw_key)
                if not key:
                    _warn(f"Ignoring inline-style mapping entry with empty property name: {raw_key!r}")
                    continue
                value = _coerce_style_value(key, raw_value)
                if value is None:
                    continue
                self._set_prop(key, value)
            return
        if isinstance(fragment, Iterable) and not isinstance(fragment, (bytes, bytearray)):
            for item in fragment:
                self._merge_one(item)
            return
        _warn(f"Unsupported inline-style fragment type {type(fragment).__name__}; coercing to string")
        for key, value in _parse_style_string(str(fragment)):
            self._set_prop(key, value)

    def _set_prop(self, key: str, value: str) -> None:
        if key in self._props:
            # Overrides move to the end so merge order is preserved.
            self._props.pop(key, None)
        self._props[key] = value

    def items(self) -> list[tuple[str, str]]:
        return list(self._props.items())

    def to_css(self, *, trailing_semicolon: bool = False) -> str:
        if not self._props:
            return ""
        body = ";".join(f"{name}:{value}" for name, value in self._props.items())
        return f"{body};" if trailing_semicolon else body

    @classmethod
    def from_any(cls, *fragments: Any, **props: Any) -> "Style":
        return cls().merge(*fragments, **props)


def style_to_css(value: StyleLike, *, trailing_semicolon: bool = False) -> str:
    if value is None or value is False:
        return ""
    if isinstance(value, str):
        return value.strip()
    return Style.from_any(value).to_css(trailing_semicolon=trailing_semicolon)
