"""
VB.NET engine.

    Imports System.Reflection
    <assembly: AssemblyTitle("title")>
    <assembly: ComVisible(False)>
"""

from asminfo.backends.base import LanguageEngine
from asminfo.model import AttributeValue, Language


class VbNetEngine(LanguageEngine):
    language = Language.VB

    # VB boolean literals are capitalised
    true_literal = "True"
    false_literal = "False"

    def using(self, namespace: str) -> str:
        return f"Imports {namespace}"

    def attribute(self, name: str, value: AttributeValue) -> str:
        return f"<assembly: {name}({self.format_value(value)})>"

    def attribute_empty(self, name: str) -> str:
        return f"<assembly: {name}()>"
