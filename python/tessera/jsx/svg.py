from __future__ import annotations

import re
from html import escape
from typing import Any

from .classify import ElementKind, as_element, classify
from .core import Element
from .style import style_to_css

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# SVG attributes whose canonical spelling is camelCase; everything else is
# written in kebab-case, matching how React serializes SVG props.
CAMEL_CASE_ATTRS = frozenset(
    {
        "allowReorder",
        "attributeName",
        "attributeType",
        "baseFrequency",
        "baseProfile",
        "calcMode",
        "clipPathUnits",
        "contentScriptType",
        "contentStyleType",
        "diffuseConstant",
        "edgeMode",
        "filterRes",
        "filterUnits",
        "glyphRef",
        "gradientTransform",
        "gradientUnits",
        "kernelMatrix",
        "kernelUnitLength",
        "keyPoints",
        "keySplines",
        "keyTimes",
        "lengthAdjust",
        "limitingConeAngle",
        "markerHeight",
        "markerUnits",
        "markerWidth",
        "maskContentUnits",
        "maskUnits",
        "numOctaves",
        "pathLength",
        "patternContentUnits",
        "patternTransform",
        "patternUnits",
        "pointsAtX",
        "pointsAtY",
        "pointsAtZ",
        "preserveAlpha",
        "preserveAspectRatio",
        "primitiveUnits",
        "refX",
        "refY",
        "repeatCount",
        "repeatDur",
        "requiredExtensions",
        "requiredFeatures",
        "specularConstant",
        "specularExponent",
        "spreadMethod",
        "startOffset",
        "stdDeviation",
        "stitchTiles",
        "surfaceScale",
        "systemLanguage",
        "tableValues",
        "targetX",
        "targetY",
        "textLength",
        "viewBox",
        "viewTarget",
        "xChannelSelector",
        "yChannelSelector",
        "zoomAndPan",
    }
)

_NAMESPACED_PREFIXES = ("xlink", "xml", "xmlns")
_SKIPPED_PROPS = frozenset({"children", "key", "ref"})
_UPPER_RE = re.compile(r"([A-Z])")


def _normalize_attr_name(name: str) -> str:
    if name in ("class_name", "className"):
        return "class"
    if "-" in name or ":" in name or name in CAMEL_CASE_ATTRS:
        return name
    for prefix in _NAMESPACED_PREFIXES:
        rest = name[len(prefix) :]
        if name.startswith(prefix) and rest[:1].isupper():
            return f"{prefix}:{rest.lower()}"
        if name.startswith(prefix + "_") and rest[1:]:
            return f"{prefix}:{rest[1:].lower()}"
    return _UPPER_RE.sub(r"-\1", name).replace("_", "-").lower()


def _render_attr_value(attr: str, value: Any) -> str | None:
    if attr == "style":
        rendered = style_to_css(value)
        return rendered or None
    return str(value)


def _render_attrs(props: dict[str, Any]) -> str:
    parts: list[str] = []
    for key, value in props.items():
        if key in _SKIPPED_PROPS:
            continue
        if value is None or value is False:
            continue
        attr = _normalize_attr_name(key)
        if value is True:
            parts.append(attr)
        else:
            rendered = _render_attr_value(attr, value)
            if rendered is None:
                continue
            parts.append(f'{attr}="{escape(rendered, quote=True)}"')
    return (" " + " ".join(parts)) if parts else ""


def _render_markup(node: Any) -> str:
    kind = classify(node)
    if kind is ElementKind.EMPTY:
        return ""
    if kind is ElementKind.DEFERRED:
        raise TypeError("SVG markup cannot contain awaitable children; resolve them before rendering")
    if kind is ElementKind.SEQUENCE:
        return "".join(_render_markup(child) for child in node)
    if kind is ElementKind.PRIMITIVE:
        return escape(str(node), quote=False)

    element = as_element(node)
    if kind is ElementKind.FRAGMENT:
        return "".join(_render_markup(child) for child in element.children)
    if kind is ElementKind.FUNCTION:
        return _render_markup(element.tag(element.component_props()))
    if kind is ElementKind.FORWARD_REF:
        return _render_markup(element.tag.render(element.component_props(), None))
    if kind is ElementKind.MEMO:
        inner = element.tag.inner
        return _render_markup(Element(tag=inner, props=element.props, children=element.children))

    tag = str(element.tag)
    attrs = _render_attrs(element.props)
    children = "".join(_render_markup(child) for child in element.children)
    return f"<{tag}{attrs}>{children}</{tag}>"


def serialize_svg(element: Element) -> str:
    """Serialize an `<svg>` element subtree to standalone markup.

    The root gets an `xmlns` declaration when the author left it out, since
    the engine parses the result as an independent SVG document.
    """
    props = element.props
    if "xmlns" not in props:
        props = {"xmlns": SVG_NAMESPACE, **props}
    root = Element(tag=element.tag, props=props, children=element.children)
    return _render_markup(root)
