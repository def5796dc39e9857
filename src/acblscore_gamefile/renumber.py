from . import const as C
from .log import get_logger

log = get_logger(__name__)


class Renumbering:
    """
    Sparse (pair, direction) -> new pair number overrides.

    ACBLscore's EDMOV command can renumber a pair after seating. The section
    details keep one byte per pair (Howell) or one per pair and direction
    (Mitchell); a non-zero byte is the replacement number.
    """

    def __init__(self, overrides=None, per_direction=False):
        self.overrides = dict(overrides or {})
        self.per_direction = per_direction

    @classmethod
    def read(cls, rd, details_ofs, is_howell):
        ofs = details_ofs + C.PAIR_MAP_BASE
        if is_howell:
            raw = rd.u8_array(ofs, C.HOWELL_RENUMBER_SIZE)
            ov = {(i + 1, 0): v for i, v in enumerate(raw) if v}
        else:
            raw = rd.u8_array(ofs, C.MITCHELL_RENUMBER_SIZE)
            ov = {(i // 4 + 1, i % 4): v for i, v in enumerate(raw) if v}
        if ov:
            log.debug("section at 0x%X renumbers %d seat(s)", details_ofs, len(ov))
        return cls(ov, per_direction=not is_howell)

    def apply(self, pair, direction=0):
        key = (pair, direction if self.per_direction else 0)
        return self.overrides.get(key, pair)

    def __bool__(self):
        return bool(self.overrides)

    def __len__(self):
        return len(self.overrides)


NO_RENUMBERING = Renumbering()
