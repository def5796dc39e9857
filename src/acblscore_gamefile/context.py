from dataclasses import dataclass, replace

from .options import DecodeOptions
from .reader import Reader


@dataclass(frozen=True)
class DecodeContext:
    """Everything a nested decoder needs from the records above it.

    A new context is derived per event (``for_event``) instead of sharing a
    mutable "current event".
    """

    reader: Reader
    options: DecodeOptions
    rank_str: str = ""

    def for_event(self, rank_str=""):
        return replace(self, rank_str=rank_str)
