# Core modules

from .config import settings, get_settings, Settings
from .output import OutputSink, ConsoleSink, BufferedSink, format_amount, format_grams

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "OutputSink",
    "ConsoleSink",
    "BufferedSink",
    "format_amount",
    "format_grams",
]
