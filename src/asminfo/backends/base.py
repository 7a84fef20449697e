"""
Language engine interface.

A language engine knows how to spell three kinds of line in one target
language: a namespace import, an attribute with an argument and an attribute
without one. Engines hold no state.
"""

from abc import ABC, abstractmethod

from asminfo.model import AttributeValue, Language


class LanguageEngine(ABC):
    """
    Base class for per-language formatting rules.

    DO NOT:
        - Decide which attributes are emitted (belongs in attributes.py)
        - Escape string values (values are written verbatim)
    """

    language: Language

    true_literal: str = "true"
    false_literal: str = "false"

    @abstractmethod
    def using(self, namespace: str) -> str:
        """Render a namespace import line."""

    @abstractmethod
    def attribute(self, name: str, value: AttributeValue) -> str:
        """Render an assembly attribute with one argument."""

    @abstractmethod
    def attribute_empty(self, name: str) -> str:
        """Render an assembly attribute with no arguments."""

    def format_value(self, value: AttributeValue) -> str:
        """Booleans become the language's literals, anything else a quoted string."""
        if isinstance(value, bool):
            return self.true_literal if value else self.false_literal
        return f'"{value}"'

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
