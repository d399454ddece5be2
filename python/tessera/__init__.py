# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Tessera-Commercial
"""Compile component element trees into render-node trees for image rendering.

Build trees with `tessera.jsx.el` (or plain `{"type": ..., "props": ...}`
mappings), compile them with `tessera.jsx.compile`, and hand the resulting
node's `to_dict()` to a rasterization engine.
"""
from .config import Config
from .jsx import CompileOptions, MissingSourceError, compile, compile_sync, el, fragment
from .nodes import (
    ContainerNode,
    ImageNode,
    Node,
    NodeWarning,
    TextNode,
    container,
    em,
    fr,
    image,
    node_from_dict,
    percentage,
    px,
    rem,
    rgba,
    text,
    vh,
    vw,
)
from .render import Renderer, render_element

SPDX_LICENSE_EXPRESSION = "AGPL-3.0-only OR LicenseRef-Tessera-Commercial"

__all__ = [
    "SPDX_LICENSE_EXPRESSION",
    "CompileOptions",
    "Config",
    "ContainerNode",
    "ImageNode",
    "MissingSourceError",
    "Node",
    "NodeWarning",
    "Renderer",
    "TextNode",
    "compile",
    "compile_sync",
    "container",
    "el",
    "em",
    "fr",
    "fragment",
    "image",
    "node_from_dict",
    "percentage",
    "px",
    "rem",
    "render_element",
    "rgba",
    "text",
    "vh",
    "vw",
]
