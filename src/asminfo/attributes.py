"""
Namespace and attribute resolution.

Turns an AssemblyInfoConfig into the two ordered lists every language
engine renders: the namespaces to import and the attributes to declare.

Nothing in here knows about target-language syntax.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from asminfo.model import (
    DEFAULT_NAMESPACES,
    EMPTY,
    FIXED_ATTRIBUTES,
    AssemblyInfoConfig,
    AttributeValue,
)


def resolve_namespaces(namespaces: Optional[Iterable[str]] = None) -> List[str]:
    """
    Build the import list for a generated file.

    The two default namespaces always come first. Extra namespaces follow in
    the order given, and only the first occurrence of each name is kept
    (exact, case-sensitive comparison).

    Args:
        namespaces: Additional namespaces (may be None or contain duplicates).
            A bare string counts as a single namespace.

    Returns:
        Ordered list of distinct namespace names
    """
    if isinstance(namespaces, str):
        namespaces = [namespaces]

    resolved: List[str] = []
    seen = set()
    for ns in list(DEFAULT_NAMESPACES) + list(namespaces or []):
        if ns in seen:
            continue
        seen.add(ns)
        resolved.append(ns)
    return resolved


def build_attributes(config: AssemblyInfoConfig) -> Dict[str, Optional[AttributeValue]]:
    """
    Merge the well-known attributes with the custom ones.

    Well-known attributes come first in their fixed order, valued from the
    matching config field (None when unset). Custom attributes are then
    upserted: a key that matches a well-known attribute replaces its value
    in place, any other key is appended in the custom mapping's order.

    Args:
        config: Generation config

    Returns:
        Insertion-ordered mapping of attribute name to value or None
    """
    items: Dict[str, Optional[AttributeValue]] = {
        name: getattr(config, field_name) for name, field_name in FIXED_ATTRIBUTES
    }
    if config.custom_attributes:
        items.update(config.custom_attributes)
    return items


def present_attributes(items: Dict[str, Optional[AttributeValue]]) -> List[Tuple[str, AttributeValue]]:
    """Drop unset (None) entries, keeping order. False and "" are kept."""
    return [(name, value) for name, value in items.items() if value is not None]


def is_empty_marker(value: AttributeValue) -> bool:
    """True when value asks for the no-argument attribute form."""
    return isinstance(value, str) and value == EMPTY
