# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Tessera-Commercial
"""Render-node tree handed to the rasterization engine.

Three node shapes exist: `ContainerNode`, `TextNode` and `ImageNode`. Builders
(`container`, `text`, `image`) omit empty style maps and unset fields so the
wire payload never carries placeholders such as `{}` or `null`.
"""
from __future__ import annotations

import json
import math
import warnings
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

StyleMap = Mapping[str, Any]


class NodeWarning(UserWarning):
    """Warning emitted when a node field had to be dropped during coercion."""


def _style_or_none(value: StyleMap | None) -> StyleMap | None:
    if value is None or len(value) == 0:
        return None
    return value


def _tw_or_none(value: str | None) -> str | None:
    return value or None


def _common_fields(node: "Node") -> dict[str, Any]:
    out: dict[str, Any] = {}
    if node.preset is not None:
        out["preset"] = dict(node.preset)
    if node.style is not None:
        out["style"] = dict(node.style)
    if node.tw is not None:
        out["tw"] = node.tw
    return out


@dataclass(frozen=True)
class ContainerNode:
    children: tuple["Node", ...] = ()
    preset: StyleMap | None = None
    style: StyleMap | None = None
    tw: str | None = None

    type = "container"

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type}
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        out.update(_common_fields(self))
        return out

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)


@dataclass(frozen=True)
class TextNode:
    text: str
    preset: StyleMap | None = None
    style: StyleMap | None = None
    tw: str | None = None

    type = "text"

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type, "text": self.text}
        out.update(_common_fields(self))
        return out

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)


@dataclass(frozen=True)
class ImageNode:
    src: str
    width: float | None = None
    height: float | None = None
    preset: StyleMap | None = None
    style: StyleMap | None = None
    tw: str | None = None

    type = "image"

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type, "src": self.src}
        if self.width is not None:
            out["width"] = self.width
        if self.height is not None:
            out["height"] = self.height
        out.update(_common_fields(self))
        return out

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)


Node = Union[ContainerNode, TextNode, ImageNode]


def container(
    children: Sequence[Node] | None = None,
    *,
    preset: StyleMap | None = None,
    style: StyleMap | None = None,
    tw: str | None = None,
) -> ContainerNode:
    return ContainerNode(
        children=tuple(children or ()),
        preset=_style_or_none(preset),
        style=_style_or_none(style),
        tw=_tw_or_none(tw),
    )


def text(
    content: str,
    style: StyleMap | None = None,
    *,
    preset: StyleMap | None = None,
    tw: str | None = None,
) -> TextNode:
    """Build a text node.

    The short form `text("Hello", {"color": "red"})` attaches an inline style
    directly; presets and utility classes are keyword-only.
    """
    return TextNode(
        text=str(content),
        preset=_style_or_none(preset),
        style=_style_or_none(style),
        tw=_tw_or_none(tw),
    )


def image(
    src: str,
    *,
    width: float | None = None,
    height: float | None = None,
    preset: StyleMap | None = None,
    style: StyleMap | None = None,
    tw: str | None = None,
) -> ImageNode:
    if not src:
        raise ValueError("image() requires a non-empty src")
    return ImageNode(
        src=src,
        width=width,
        height=height,
        preset=_style_or_none(preset),
        style=_style_or_none(style),
        tw=_tw_or_none(tw),
    )


def as_dimension(value: Any) -> float | None:
    """Coerce an authored width/height to a number, or None when impossible.

    Integral values come back as `int` so `"60"` serializes as `60`.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        warnings.warn(f"Ignoring boolean image dimension {value!r}", NodeWarning, stacklevel=3)
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        warnings.warn(f"Ignoring non-numeric image dimension {value!r}", NodeWarning, stacklevel=3)
        return None
    if not math.isfinite(number):
        warnings.warn(f"Ignoring non-finite image dimension {value!r}", NodeWarning, stacklevel=3)
        return None
    if number.is_integer():
        return int(number)
    return number


def node_from_dict(data: Mapping[str, Any]) -> Node:
    """Rebuild a node tree from its wire dictionary."""
    kind = data.get("type")
    preset = data.get("preset")
    style = data.get("style")
    tw = data.get("tw")
    if kind == "container":
        return container(
            [node_from_dict(child) for child in data.get("children") or ()],
            preset=preset,
            style=style,
            tw=tw,
        )
    if kind == "text":
        return text(data.get("text", ""), style, preset=preset, tw=tw)
    if kind == "image":
        return image(
            data.get("src", ""),
            width=data.get("width"),
            height=data.get("height"),
            preset=preset,
            style=style,
            tw=tw,
        )
    raise ValueError(f"Unsupported node type {kind!r}. Expected 'container', 'text', or 'image'.")


def _unit(value: Any, suffix: str) -> str:
    return f"{value}{suffix}"


def percentage(value: Any) -> str:
    return _unit(value, "%")


def px(value: Any) -> str:
    return _unit(value, "px")


def em(value: Any) -> str:
    return _unit(value, "em")


def rem(value: Any) -> str:
    return _unit(value, "rem")


def vw(value: Any) -> str:
    return _unit(value, "vw")


def vh(value: Any) -> str:
    return _unit(value, "vh")


def fr(value: Any) -> str:
    return _unit(value, "fr")


def rgba(r: int, g: int, b: int, a: float = 1) -> str:
    return f"rgb({r} {g} {b} / {a})"
