# src/iconswap/codemod/errors.py


class IconSwapError(Exception):
    """Base class for failures that abort a whole run."""


class ConfigError(IconSwapError):
    """The configuration file or manifest is malformed."""


class SourceRootNotFoundError(IconSwapError):
    """The project directory or its source root does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Source root does not exist or is not a directory: {path}")
