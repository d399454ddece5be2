"""Element classification.

`classify` is the single place where input values are inspected by shape;
everything downstream dispatches on the returned `ElementKind`.
"""
from __future__ import annotations

import enum
import inspect
import warnings
from collections.abc import Iterable, Mapping
from typing import Any

from .core import Element, ForwardRef, Fragment, Memo
from .style import StyleWarning


class ElementKind(enum.Enum):
    EMPTY = "empty"
    DEFERRED = "deferred"
    SEQUENCE = "sequence"
    FRAGMENT = "fragment"
    FORWARD_REF = "forward_ref"
    MEMO = "memo"
    HOST = "host"
    FUNCTION = "function"
    PRIMITIVE = "primitive"


_NON_SEQUENCE_ITERABLES = (str, bytes, bytearray, Mapping, Element)


def _is_element_shaped(value: Any) -> bool:
    if isinstance(value, Element):
        return True
    return isinstance(value, Mapping) and "type" in value


def _element_tag(value: Any) -> Any:
    if isinstance(value, Element):
        return value.tag
    return value["type"]


def classify(value: Any) -> ElementKind:
    if value is None or value is False:
        return ElementKind.EMPTY
    if inspect.isawaitable(value):
        return ElementKind.DEFERRED
    if isinstance(value, Iterable) and not isinstance(value, _NON_SEQUENCE_ITERABLES):
        return ElementKind.SEQUENCE
    if not _is_element_shaped(value):
        return ElementKind.PRIMITIVE

    tag = _element_tag(value)
    if tag is Fragment:
        return ElementKind.FRAGMENT
    if isinstance(tag, ForwardRef):
        return ElementKind.FORWARD_REF
    if isinstance(tag, Memo):
        return ElementKind.MEMO
    if isinstance(tag, str):
        return ElementKind.HOST
    if callable(tag):
        return ElementKind.FUNCTION
    # Unknown tag shapes render like an anonymous host element.
    return ElementKind.HOST


def as_element(value: Any) -> Element:
    """Return an `Element` view of an element-shaped value.

    Mapping-shaped elements (`{"type": ..., "props": {...}}`) carry their
    children under `props["children"]`; they are lifted into the element's
    child list so every later stage sees one shape.
    """
    if isinstance(value, Element):
        return value
    raw_props = value.get("props")
    if raw_props is None:
        props: dict[str, Any] = {}
    elif isinstance(raw_props, Mapping):
        props = dict(raw_props)
    else:
        warnings.warn(
            f"Ignoring non-mapping props of type {type(raw_props).__name__}", StyleWarning, stacklevel=2
        )
        props = {}
    children = props.pop("children", None)
    if children is None:
        child_list: list[Any] = []
    elif isinstance(children, (list, tuple)):
        child_list = list(children)
    else:
        child_list = [children]
    return Element(tag=value["type"], props=props, children=child_list)
