from __future__ import annotations

from collections.abc import Collection
from typing import Any

from .classify import ElementKind, as_element, classify
from .core import Element


def _text_atom(value: Any) -> str | None:
    # bool is an int subclass but never counts as text.
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def collect_text(element: Element) -> str | None:
    """Return the element's children as one string when they are pure text.

    Pure text means a lone string/number child, a collection whose items are
    all strings/numbers, or a lone fragment wrapping either of those. Anything
    else returns None and the caller builds a container instead. One-shot
    iterators are left untouched so the resolver can still consume them.
    """
    content = element.content
    atom = _text_atom(content)
    if atom is not None:
        return atom

    if isinstance(content, Collection) and classify(content) is ElementKind.SEQUENCE:
        parts: list[str] = []
        for child in content:
            part = _text_atom(child)
            if part is None:
                return None
            parts.append(part)
        return "".join(parts)

    if classify(content) is ElementKind.FRAGMENT:
        return collect_text(as_element(content))
    return None
