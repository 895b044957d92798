"""Core functionality for yCard processing."""

from . import models
from . import parsers
from . import converters

__all__ = ["models", "parsers", "converters"]
