from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


class _FragmentType:
    __slots__ = ()

    def __repr__(self) -> str:
        return "Fragment"


Fragment = _FragmentType()
"""Tag marking a transparent grouping element, the `<>...</>` of JSX."""


@dataclass(frozen=True)
class ForwardRef:
    """Component wrapper whose render function also receives a ref (always None here)."""

    render: Callable[[dict[str, Any], Any], Any]


@dataclass(frozen=True)
class Memo:
    """Memoized component wrapper; `inner` is a function component or a host tag."""

    inner: Any


@dataclass
class Element:
    tag: Any
    props: dict[str, Any] = field(default_factory=dict)
    children: list[Any] = field(default_factory=list)

    @property
    def content(self) -> Any:
        """Children as a single value: None, the lone child, or the whole list."""
        if not self.children:
            return None
        if len(self.children) == 1:
            return self.children[0]
        return list(self.children)

    def component_props(self) -> dict[str, Any]:
        """Props passed to a component tag, with `children` folded in when present."""
        props = dict(self.props)
        content = self.content
        if content is not None:
            props["children"] = content
        return props


def forward_ref(render: Callable[[dict[str, Any], Any], Any]) -> ForwardRef:
    return ForwardRef(render=render)


def memo(inner: Any) -> Memo:
    return Memo(inner=inner)


def el(tag: Any, *children: Any, **props: Any) -> Element:
    flat: list[Any] = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, (list, tuple)):
            flat.extend(x for x in child if x is not None)
        else:
            flat.append(child)
    return Element(tag=tag, props=props, children=flat)


def fragment(*children: Any) -> Element:
    return el(Fragment, *children)
