"""
Core Assembly Info Model Objects

Defines the data structures shared by every layer of the generator:
    - Language (target language selector)
    - AssemblyInfoConfig (the input control record)
    - OutputFile (the produced artifact)
    - The fixed table of well-known assembly attributes

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about C# or VB.NET syntax
        - Are immutable
        - Are fully serializable
        - Represent input and output, not formatting
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Tuple, Union


EMPTY = "empty"
"""Attribute value meaning "emit this attribute with no argument list"."""

AttributeValue = Union[str, bool]

DEFAULT_NAMESPACES: Tuple[str, ...] = (
    "System.Reflection",
    "System.Runtime.InteropServices",
)


class Language(Enum):
    """Target languages with a built-in template."""
    CS = "cs"
    VB = "vb"


# (attribute name, AssemblyInfoConfig field) in emission order
FIXED_ATTRIBUTES: Tuple[Tuple[str, str], ...] = (
    ("AssemblyTitle", "title"),
    ("AssemblyDescription", "description"),
    ("AssemblyCompany", "company_name"),
    ("AssemblyProduct", "product_name"),
    ("AssemblyCopyright", "copyright"),
    ("AssemblyTrademark", "trademark"),
    ("ComVisible", "com_visible"),
    ("Guid", "com_guid"),
    ("AssemblyVersion", "version"),
    ("AssemblyFileVersion", "file_version"),
)


@dataclass(frozen=True)
class AssemblyInfoConfig:
    """
    The control record for one generation run.

    Every metadata field is optional. None means "not configured" and the
    corresponding attribute is left out of the output. None is distinct from
    False and from the empty string, both of which are emitted.

    Properties:
        output_file:
            Path of the produced artifact. Required when rendering.

        language:
            "cs" or "vb". None selects "cs".

        namespaces:
            Extra namespaces to import, in order. Duplicates are allowed
            here and removed when rendering.

        title, description, company_name, product_name, copyright,
        trademark, com_guid, version, file_version:
            Values of the well-known assembly attributes.

        com_visible:
            Value of the ComVisible attribute.

        custom_attributes:
            Additional attributes keyed by attribute name. A value of
            "empty" emits the attribute with no arguments. Keys matching a
            well-known attribute override its value.
    """

    output_file: Optional[str] = None
    language: Optional[str] = None
    namespaces: Sequence[str] = field(default_factory=tuple)

    title: Optional[str] = None
    description: Optional[str] = None
    company_name: Optional[str] = None
    product_name: Optional[str] = None
    copyright: Optional[str] = None
    trademark: Optional[str] = None
    com_visible: Optional[bool] = None
    com_guid: Optional[str] = None
    version: Optional[str] = None
    file_version: Optional[str] = None

    custom_attributes: Optional[Mapping[str, AttributeValue]] = None


@dataclass(frozen=True)
class OutputFile:
    """
    A generated file held in memory.

    Properties:
        path:
            Destination path, exactly as configured
        contents:
            UTF-8 encoded file text
    """

    path: str
    contents: bytes

    @property
    def text(self) -> str:
        return self.contents.decode("utf-8")

    def lines(self) -> List[str]:
        """Split the contents into lines without dropping blank ones."""
        return self.text.split("\n")

    def write(self, base_dir: Optional[Union[str, Path]] = None) -> Path:
        """
        Write the contents to disk.

        Args:
            base_dir: Directory that a relative path is resolved against
                (default: current working directory)

        Returns:
            The path that was written
        """
        target = Path(self.path)
        if base_dir is not None and not target.is_absolute():
            target = Path(base_dir) / target
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(self.contents)
        return target
