"""Element tree to render-node compiler.

`compile` walks an element tree depth-first and produces exactly one root
render node. Awaitable elements are awaited in place; iterables fan out into
concurrently resolved children, bounded per iterable, with results written to
index-addressed slots so output order always matches input order.
"""
from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from ..nodes import Node, as_dimension, container, image, percentage, text
from .classify import ElementKind, as_element, classify
from .core import Element
from .presets import DEFAULT_STYLE_PRESETS, PLAIN_TEXT_PRESET_TAG, PresetTable
from .style import resolve_style, resolve_tw
from .svg import serialize_svg
from .text import collect_text

MAX_CONCURRENT_ITERABLE_RESOLUTION = 8

VOID_TAGS = frozenset({"head", "meta", "link", "style", "script"})


def _retrieve_exception(task: asyncio.Future[None]) -> None:
    # Siblings of a failed child keep running; their errors are dropped quietly.
    if not task.cancelled():
        task.exception()


class MissingSourceError(ValueError):
    """Raised when an `img`/`svg` element cannot produce an image source."""

    def __init__(self, tag: str, message: str = "Image element must have a 'src' prop.") -> None:
        super().__init__(message)
        self.tag = tag


@dataclass(frozen=True)
class CompileOptions:
    # True: built-in presets; False: no presets; a mapping replaces the table.
    default_styles: PresetTable | bool = True
    tailwind_property: str = "tw"
    max_concurrency: int = MAX_CONCURRENT_ITERABLE_RESOLUTION
    svg_serializer: Callable[[Element], str] = serialize_svg

    def __post_init__(self) -> None:
        if isinstance(self.max_concurrency, bool) or not isinstance(self.max_concurrency, int):
            raise TypeError(f"max_concurrency must be an int, got {type(self.max_concurrency).__name__}")
        if self.max_concurrency < 1:
            raise ValueError(f"max_concurrency must be at least 1, got {self.max_concurrency}")
        if not isinstance(self.default_styles, (bool, Mapping)):
            raise TypeError(
                "default_styles must be True, False, or a mapping of tag name to style map; "
                f"got {type(self.default_styles).__name__}"
            )
        if not self.tailwind_property:
            raise ValueError("tailwind_property must be a non-empty prop name")

    @property
    def presets(self) -> PresetTable | None:
        if self.default_styles is False:
            return None
        if self.default_styles is True:
            return DEFAULT_STYLE_PRESETS
        return self.default_styles


class _Resolver:
    def __init__(self, options: CompileOptions) -> None:
        self.presets = options.presets
        self.tw_property = options.tailwind_property
        self.max_concurrency = options.max_concurrency
        self.serialize_svg = options.svg_serializer

    @property
    def plain_text_preset(self) -> Mapping[str, Any] | None:
        if self.presets is None:
            return None
        return self.presets.get(PLAIN_TEXT_PRESET_TAG)

    async def resolve(self, node: Any) -> list[Node]:
        kind = classify(node)

        if kind is ElementKind.EMPTY:
            return []
        if kind is ElementKind.DEFERRED:
            return await self.resolve(await node)
        if kind is ElementKind.SEQUENCE:
            return await self.resolve_iterable(node)
        if kind is ElementKind.PRIMITIVE:
            content = str(node).lower() if isinstance(node, bool) else str(node)
            return [text(content, preset=self.plain_text_preset)]

        element = as_element(node)
        if kind is ElementKind.FUNCTION:
            return await self.resolve(element.tag(element.component_props()))
        if kind is ElementKind.FORWARD_REF:
            return await self.resolve(element.tag.render(element.component_props(), None))
        if kind is ElementKind.MEMO:
            inner = element.tag.inner
            if classify(Element(tag=inner)) is ElementKind.FUNCTION:
                return await self.resolve(inner(element.component_props()))
            # Host tags and nested wrappers go back through the full dispatch.
            return await self.resolve(replace(element, tag=inner))
        if kind is ElementKind.FRAGMENT:
            return await self.resolve(element.content)
        if kind is ElementKind.HOST:
            return await self.resolve_host(element)
        raise AssertionError(f"unhandled element kind: {kind!r}")

    async def resolve_host(self, element: Element) -> list[Node]:
        tag = element.tag
        if isinstance(tag, str):
            if tag in VOID_TAGS:
                return []
            if tag == "br":
                return [text("\n", preset=self.plain_text_preset)]
            if tag == "img":
                return [self.build_image(element, element.props.get("src"))]
            if tag == "svg":
                return [self.build_image(element, self.serialize_svg(element))]

        preset, style = resolve_style(element, self.presets)
        tw = resolve_tw(element, self.tw_property)

        collapsed = collect_text(element)
        if collapsed is not None:
            return [text(collapsed, style, preset=preset, tw=tw)]

        children = await self.resolve(element.content)
        return [container(children, preset=preset, style=style, tw=tw)]

    def build_image(self, element: Element, src: Any) -> Node:
        if src is None or src is False or src == "":
            raise MissingSourceError(str(element.tag))
        preset, style = resolve_style(element, self.presets)
        return image(
            str(src),
            width=as_dimension(element.props.get("width")),
            height=as_dimension(element.props.get("height")),
            preset=preset,
            style=style,
            tw=resolve_tw(element, self.tw_property),
        )

    async def resolve_iterable(self, items: Iterable[Any]) -> list[Node]:
        slots: list[list[Node]] = []
        in_flight: set[asyncio.Future[None]] = set()

        async def fill(index: int, item: Any) -> None:
            slots[index] = await self.resolve(item)

        for index, item in enumerate(items):
            slots.append([])
            task = asyncio.ensure_future(fill(index, item))
            task.add_done_callback(_retrieve_exception)
            in_flight.add(task)
            if len(in_flight) >= self.max_concurrency:
                done, in_flight = await asyncio.wait(in_flight, return_when=asyncio.FIRST_COMPLETED)
                for task in done:
                    task.result()

        if in_flight:
            await asyncio.gather(*in_flight)

        return [node for group in slots for node in group]


async def resolve(element: Any, options: CompileOptions | None = None) -> list[Node]:
    """Resolve an element into the ordered list of render nodes it produces."""
    return await _Resolver(options or CompileOptions()).resolve(element)


async def compile(element: Any, options: CompileOptions | None = None) -> Node:
    nodes = await resolve(element, options)
    if not nodes:
        return container()
    if len(nodes) == 1:
        return nodes[0]
    return container(nodes, style={"width": percentage(100), "height": percentage(100)})


def compile_sync(element: Any, options: CompileOptions | None = None) -> Node:
    """Run `compile` on a fresh event loop; not for use inside a running loop."""
    return asyncio.run(compile(element, options))
