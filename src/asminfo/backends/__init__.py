"""Language engines for assembly info output (C#, VB.NET)."""

from typing import Dict, Optional, Union

from .base import LanguageEngine
from .csharp import CSharpEngine
from .vbnet import VbNetEngine
from asminfo.errors import UnrecognizedLanguageError
from asminfo.model import Language


# Closed set: one engine per Language member.
ENGINES: Dict[Language, LanguageEngine] = {
    Language.CS: CSharpEngine(),
    Language.VB: VbNetEngine(),
}


def get_engine(language: Optional[Union[str, Language]] = None) -> LanguageEngine:
    """
    Look up the engine for a language.

    Args:
        language: A Language member or its value ("cs", "vb").
            None or "" selects C#.

    Returns:
        The shared engine instance

    Raises:
        UnrecognizedLanguageError: If the language has no engine
    """
    if not language:
        return ENGINES[Language.CS]
    if isinstance(language, Language):
        return ENGINES[language]
    try:
        return ENGINES[Language(language)]
    except ValueError:
        raise UnrecognizedLanguageError(language) from None


__all__ = [
    "CSharpEngine",
    "ENGINES",
    "LanguageEngine",
    "VbNetEngine",
    "get_engine",
]
