"""urlpick components."""
from .options import CANCEL_VALUES, Options, find_cancel_index
from .text import Text

__all__ = [
    "CANCEL_VALUES",
    "Options",
    "Text",
    "find_cancel_index",
]
