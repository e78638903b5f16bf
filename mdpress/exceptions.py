"""Exceptions raised by mdpress."""


class MdpressError(Exception):
    """Base class for mdpress errors."""


class ConfigError(MdpressError):
    """Raised when the build configuration cannot be loaded."""


class TemplateError(MdpressError):
    """Raised when the page template cannot be loaded."""
