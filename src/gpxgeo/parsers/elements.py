"""Tag-name lookups over xml.etree.ElementTree elements.

GPX files usually declare a default namespace, so ElementTree reports
tags as ``{http://www.topografix.com/GPX/1/1}wpt``. Every lookup here
compares local names only, which keeps namespaced and bare documents
equivalent.
"""

from __future__ import annotations

import math
import xml.etree.ElementTree as ET


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from a tag."""
    if isinstance(tag, str) and tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def find_descendants(parent: ET.Element, tag: str) -> list[ET.Element]:
    """All descendants of *parent* named *tag*, in document order."""
    return [
        elem for elem in parent.iter()
        if elem is not parent and local_name(elem.tag) == tag
    ]


def find_first(parent: ET.Element, tag: str) -> ET.Element | None:
    """First descendant of *parent* named *tag*, or None."""
    for elem in parent.iter():
        if elem is not parent and local_name(elem.tag) == tag:
            return elem
    return None


def element_text(elem: ET.Element) -> str:
    """Stripped text content of an element, nested text included."""
    return "".join(elem.itertext()).strip()


def text_of(parent: ET.Element, tag: str) -> str | None:
    """Text of the first descendant named *tag*; None when there is none."""
    elem = find_first(parent, tag)
    if elem is None:
        return None
    return element_text(elem)


def direct_child(parent: ET.Element, tag: str) -> ET.Element | None:
    """Resolve *tag* under *parent*, preferring an immediate child.

    A single descendant match is returned as-is. With several matches
    (e.g. a <link> inside <author> and another beside it) the immediate
    children are scanned and the last one named *tag* wins. If no
    immediate child matches, the first descendant is returned.
    """
    matches = find_descendants(parent, tag)
    if not matches:
        return None
    if len(matches) == 1:
        return matches[0]

    found = None
    for child in parent:
        if local_name(child.tag) == tag:
            found = child
    return found if found is not None else matches[0]


def float_text(parent: ET.Element, tag: str) -> float | None:
    """Float value of the first descendant named *tag*.

    Returns None when the element is missing, empty, or not a finite
    number.
    """
    text = text_of(parent, tag)
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def float_attr(elem: ET.Element, name: str) -> float:
    """Float value of an attribute; NaN when missing, non-numeric or infinite."""
    raw = elem.get(name)
    if raw is None or "_" in raw:
        return math.nan
    try:
        value = float(raw)
    except ValueError:
        return math.nan
    if not math.isfinite(value):
        return math.nan
    return value
