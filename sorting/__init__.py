"""
sorting/
--------
Array model and run history.  Public API:

    from sorting import ArrayModel, parse_array_input, InvalidArrayInput
    from sorting import HistoryStore, HistoryEntry
"""

from sorting.array_model import ArrayModel, InvalidArrayInput, parse_array_input, random_array
from sorting.history     import HistoryEntry, HistoryStore, load_history, dump_history

__all__ = [
    "ArrayModel",
    "InvalidArrayInput",
    "parse_array_input",
    "random_array",
    "HistoryEntry",
    "HistoryStore",
    "load_history",
    "dump_history",
]
