# Color properties files

from .global_colors import GlobalColorProperties, Settings, load, load_from_text
from .util import MalformedDocumentError, read_document

__all__ = [
    "GlobalColorProperties",
    "Settings",
    "load",
    "load_from_text",
    "MalformedDocumentError",
    "read_document",
]
