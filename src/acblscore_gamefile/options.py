import os
from dataclasses import dataclass

from . import const as C

_FLAG_NAMES = {
    "sectionsonly": "sections_only",
    "noentries": "no_entries",
    "noboards": "no_boards",
}


@dataclass(frozen=True)
class DecodeOptions:
    """Switches that trade decode completeness for speed.

    sections_only: stop each section after its summary fields.
    no_entries:    skip entry and player records.
    no_boards:     skip per-board results.
    """

    sections_only: bool = False
    no_entries: bool = False
    no_boards: bool = False

    @classmethod
    def from_flags(cls, *names):
        kw = {}
        for name in names:
            key = str(name or "").strip().lower()
            if not key:
                continue
            if key not in _FLAG_NAMES:
                raise ValueError(f"unknown decode option: {name}")
            kw[_FLAG_NAMES[key]] = True
        return cls(**kw)

    @classmethod
    def from_keywords(cls, **flags):
        """Keyword form of ``from_flags``; every name is checked, set or not."""
        unknown = sorted(k for k in flags if k.lower() not in _FLAG_NAMES)
        if unknown:
            raise ValueError(f"unknown decode option: {', '.join(unknown)}")
        return cls.from_flags(*[k for k, v in flags.items() if v])

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        value = env.get(C.OPTIONS_ENV, "")
        return cls.from_flags(*value.split(","))
