from .classify import ElementKind, as_element, classify
from .compiler import (
    MAX_CONCURRENT_ITERABLE_RESOLUTION,
    VOID_TAGS,
    CompileOptions,
    MissingSourceError,
    compile,
    compile_sync,
    resolve,
)
from .core import Element, ForwardRef, Fragment, Memo, el, forward_ref, fragment, memo
from .presets import DEFAULT_STYLE_PRESETS, merge_presets
from .style import Style, StyleWarning, resolve_style, resolve_tw, style_to_css
from .svg import serialize_svg
from .text import collect_text

__all__ = [
    "DEFAULT_STYLE_PRESETS",
    "MAX_CONCURRENT_ITERABLE_RESOLUTION",
    "VOID_TAGS",
    "CompileOptions",
    "Element",
    "ElementKind",
    "ForwardRef",
    "Fragment",
    "Memo",
    "MissingSourceError",
    "Style",
    "StyleWarning",
    "as_element",
    "classify",
    "collect_text",
    "compile",
    "compile_sync",
    "el",
    "forward_ref",
    "fragment",
    "memo",
    "merge_presets",
    "resolve",
    "resolve_style",
    "resolve_tw",
    "serialize_svg",
    "style_to_css",
]
