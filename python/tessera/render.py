# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Tessera-Commercial
"""Boundary with the external rasterization engine.

The engine is duck-typed: anything with `render(node, options)` returning
image bytes (or an awaitable of them) works. Compilation always finishes, or
fails, before the engine is called.
"""
from __future__ import annotations

import inspect
from typing import Any, Mapping, Protocol

from .jsx.compiler import CompileOptions, compile

DEFAULT_RENDER_OPTIONS: Mapping[str, Any] = {"format": "webp"}


class Renderer(Protocol):
    def render(self, node: dict[str, Any], options: Mapping[str, Any]) -> Any:
        ...


async def render_element(
    element: Any,
    renderer: Renderer,
    *,
    compile_options: CompileOptions | None = None,
    render_options: Mapping[str, Any] | None = None,
) -> bytes:
    node = await compile(element, compile_options)
    result = renderer.render(node.to_dict(), dict(render_options or DEFAULT_RENDER_OPTIONS))
    if inspect.isawaitable(result):
        result = await result
    if not isinstance(result, (bytes, bytearray, memoryview)):
        raise TypeError(f"Renderer returned {type(result).__name__}; expected image bytes")
    return bytes(result)
