"""
Assembly info file generator.

Converts an AssemblyInfoConfig into the text of an AssemblyInfo source file
and wraps it as an OutputFile.

Output layout:
    - One import line per namespace
    - A blank line
    - One line per configured attribute

Validation happens before any rendering: a config without an output path
or with an unknown language never produces partial output.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Union

from asminfo.attributes import (
    build_attributes,
    is_empty_marker,
    present_attributes,
    resolve_namespaces,
)
from asminfo.backends import LanguageEngine, get_engine
from asminfo.errors import MissingOutputPathError
from asminfo.model import AssemblyInfoConfig, OutputFile
from asminfo.serialization import config_from_dict

logger = logging.getLogger(__name__)


def _check_output_path(config: AssemblyInfoConfig) -> None:
    if not config.output_file:
        raise MissingOutputPathError()


def render_lines(config: AssemblyInfoConfig, engine: LanguageEngine) -> List[str]:
    """
    Render every line of the file with the given engine.

    Args:
        config: Generation config
        engine: Language engine to format with

    Returns:
        Lines in output order, without newline characters
    """
    lines = []

    namespaces = resolve_namespaces(config.namespaces)
    for ns in namespaces:
        lines.append(engine.using(ns))

    lines.append("")

    attributes = present_attributes(build_attributes(config))
    for name, value in attributes:
        if is_empty_marker(value):
            lines.append(engine.attribute_empty(name))
        else:
            lines.append(engine.attribute(name, value))

    logger.debug(
        "rendered %d namespaces and %d attributes with %r",
        len(namespaces), len(attributes), engine,
    )
    return lines


def render(config: AssemblyInfoConfig) -> str:
    """
    Render the full text of an assembly info file.

    Args:
        config: Generation config

    Returns:
        File text, lines joined by "\\n" with no trailing newline

    Raises:
        MissingOutputPathError: If config.output_file is not set
        UnrecognizedLanguageError: If config.language has no engine
    """
    _check_output_path(config)
    engine = get_engine(config.language)
    return "\n".join(render_lines(config, engine))


def generate(config: AssemblyInfoConfig) -> OutputFile:
    """
    Render a config into an in-memory file.

    Args:
        config: Generation config

    Returns:
        OutputFile at config.output_file holding the UTF-8 encoded text

    Raises:
        MissingOutputPathError: If config.output_file is not set
        UnrecognizedLanguageError: If config.language has no engine
    """
    text = render(config)
    logger.debug("generated %s (%d chars)", config.output_file, len(text))
    return OutputFile(path=config.output_file, contents=text.encode("utf-8"))


def save_output_file(config: AssemblyInfoConfig, base_dir: Optional[str] = None) -> str:
    """
    Generate a file and write it to disk.

    Args:
        config: Generation config
        base_dir: Directory a relative output path is resolved against

    Returns:
        The path written
    """
    written = generate(config).write(base_dir)
    logger.debug("wrote %s", written)
    return str(written)


class AssemblyInfoTransform:
    """
    One-shot pipeline stage: each upstream item produces one generated file.

    The upstream item only triggers generation; its content is not read.
    Each call is independent, so the same transform can serve any number
    of items.
    """

    def __init__(self, config: AssemblyInfoConfig):
        self.config = config

    def __call__(self, item: Any = None) -> OutputFile:
        return generate(self.config)

    def process(self, items: Iterable[Any]) -> Iterator[OutputFile]:
        """Yield one OutputFile per upstream item, raising on the first failure."""
        for item in items:
            yield self(item)


def assemblyinfo(config: Union[AssemblyInfoConfig, Mapping[str, Any]]) -> AssemblyInfoTransform:
    """
    Build a pipeline transform from a config or a plain options mapping.

    Mappings use the camelCase option names (outputFile, companyName, ...).
    """
    if not isinstance(config, AssemblyInfoConfig):
        config = config_from_dict(config)
    return AssemblyInfoTransform(config)


__all__ = [
    "AssemblyInfoTransform",
    "assemblyinfo",
    "generate",
    "render",
    "render_lines",
    "save_output_file",
]
