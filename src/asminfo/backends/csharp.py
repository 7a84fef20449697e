"""
C# engine.

    using System.Reflection;
    [assembly: AssemblyTitle("title")]
    [assembly: ComVisible(false)]
"""

from asminfo.backends.base import LanguageEngine
from asminfo.model import AttributeValue, Language


class CSharpEngine(LanguageEngine):
    language = Language.CS

    def using(self, namespace: str) -> str:
        return f"using {namespace};"

    def attribute(self, name: str, value: AttributeValue) -> str:
        return f"[assembly: {name}({self.format_value(value)})]"

    def attribute_empty(self, name: str) -> str:
        return f"[assembly: {name}()]"
