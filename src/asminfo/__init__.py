"""
asminfo - AssemblyInfo source file generator.

Generates assembly-level attribute declarations (AssemblyInfo.cs /
AssemblyInfo.vb) from a single config record of product, version and
namespace fields.

The config model and attribute resolution know nothing about C# or VB.NET.
All target-language syntax lives in the backends.
"""

__version__ = "0.1.0"

from asminfo.errors import (
    AssemblyInfoError,
    ConfigError,
    MissingOutputPathError,
    UnrecognizedLanguageError,
)
from asminfo.generator import AssemblyInfoTransform, assemblyinfo, generate, render
from asminfo.model import EMPTY, AssemblyInfoConfig, Language, OutputFile

__all__ = [
    "EMPTY",
    "AssemblyInfoConfig",
    "AssemblyInfoError",
    "AssemblyInfoTransform",
    "ConfigError",
    "Language",
    "MissingOutputPathError",
    "OutputFile",
    "UnrecognizedLanguageError",
    "assemblyinfo",
    "generate",
    "render",
]
