"""Exceptions raised while loading a config or generating a file."""


class AssemblyInfoError(Exception):
    """Base class for every error this package raises."""
    pass


class MissingOutputPathError(AssemblyInfoError):
    """Raised when a config has no output path."""

    def __init__(self):
        super().__init__("outputFile is required")


class UnrecognizedLanguageError(AssemblyInfoError):
    """Raised when a config names a language with no engine."""

    def __init__(self, language):
        self.language = language
        super().__init__(f'language "{language}" is not recognised')


class ConfigError(AssemblyInfoError):
    """Raised when a config file or mapping cannot be turned into a config."""
    pass
