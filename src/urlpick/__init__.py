"""
urlpick — choose one of a short list of strings in the terminal.

Typing an option's index jumps straight to it; ambiguous prefixes ("1" while
"10" exists) are resolved after a short pause.
"""
from .components import CANCEL_VALUES, Options, Text, find_cancel_index
from .config import VERSION, Config
from .debounce import Choice, ChoiceDebouncer, choice_index, choice_option_index
from .focus import QUIT, FocusLoop, SessionState, select
from .scanner import is_url, scan
from .screen import Cell, Event, Key, KeyEvent, ResizeEvent, Screen, SimulationScreen
from .style import DEFAULT_STYLE, Style
from .utils import char_width, flow, flow_processor, visible_width

__version__ = VERSION

__all__ = [
    # Components
    "CANCEL_VALUES",
    "Options",
    "Text",
    "find_cancel_index",
    # Session
    "QUIT",
    "FocusLoop",
    "SessionState",
    "select",
    # Matching
    "Choice",
    "ChoiceDebouncer",
    "choice_index",
    "choice_option_index",
    # Screen
    "Cell",
    "Event",
    "Key",
    "KeyEvent",
    "ResizeEvent",
    "Screen",
    "SimulationScreen",
    # Style
    "DEFAULT_STYLE",
    "Style",
    # Text utilities
    "char_width",
    "flow",
    "flow_processor",
    "visible_width",
    # Scanner
    "is_url",
    "scan",
    # Config
    "Config",
]
