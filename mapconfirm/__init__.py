"""mapconfirm - ask about items one at a time, act on the accepted ones.

The confirmation loop behind "Query replace? (y, n, !, ., q, or ?)" style
prompts, usable from any Python program:

Quick Start:
    >>> from mapconfirm import run
    >>> deleted = run(
    ...     lambda path: f"Delete {path}? ",
    ...     os.remove,
    ...     ["a.tmp", "b.tmp"],
    ...     help_labels=("file", "files", "delete"),
    ... )
"""

# Version
__version__ = "1.0.0"

from mapconfirm.config import MapConfirmConfig, get_config, reset_config
from mapconfirm.display import ConsoleKeyReader, KeyReader
from mapconfirm.driver import ConfirmationDriver, DriverMode, map_y_or_n_p, run
from mapconfirm.errors import (
    CommandFailedError,
    ConfigurationError,
    ItemSourceError,
    MapConfirmError,
)
from mapconfirm.handlers import ActionHandler
from mapconfirm.help import HelpLabels, build_help_text, build_prompt_suffix
from mapconfirm.keys import Decision, classify_key, describe_key
from mapconfirm.source import EXHAUSTED, ItemSource
from mapconfirm.verdicts import (
    AUTO_ACT,
    SKIP,
    Deferred,
    DisplayString,
    PromptResult,
    Verdict,
    as_prompt_result,
    resolve,
)

__all__ = [
    # Version
    "__version__",
    # Driver
    "run",
    "map_y_or_n_p",
    "ConfirmationDriver",
    "DriverMode",
    # Prompt results
    "PromptResult",
    "DisplayString",
    "Verdict",
    "Deferred",
    "SKIP",
    "AUTO_ACT",
    "as_prompt_result",
    "resolve",
    # Sources and handlers
    "EXHAUSTED",
    "ItemSource",
    "ActionHandler",
    # Keys and help
    "Decision",
    "classify_key",
    "describe_key",
    "HelpLabels",
    "build_help_text",
    "build_prompt_suffix",
    # Terminal
    "KeyReader",
    "ConsoleKeyReader",
    # Configuration
    "MapConfirmConfig",
    "get_config",
    "reset_config",
    # Errors
    "MapConfirmError",
    "ConfigurationError",
    "ItemSourceError",
    "CommandFailedError",
]
