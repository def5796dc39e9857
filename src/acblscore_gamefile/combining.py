"""
Section combining and ranking groups.

Each section summary slot carries four 1-based slot links (0 ends a chain):

    +0x0f  previous section whose scores are combined with this one
    +0x10  next combined section
    +0x11  previous section ranked together with this one
    +0x12  next section ranked together

A combination starts at a slot with no previous-combine link. Inside it,
every slot with no previous-rank link starts a group of sections ranked as
one unit (e.g. N-S and E-W pooled across sections for section awards).
"""

from . import const as C
from .errors import FormatError, located

PREV_COMBINE = 0x0F
NEXT_COMBINE = 0x10
PREV_RANK = 0x11
NEXT_RANK = 0x12


def slot_offset(slot):
    return C.SECTION_SUMMARY_BASE + C.SECTION_SUMMARY_SIZE * slot


def event_slots(rd, event_id):
    """0-based summary slots owned by ``event_id``."""
    return [i for i in range(C.MAX_SECTIONS) if rd.u8(slot_offset(i)) == event_id]


def _walk(rd, start, link):
    """Yield 0-based slots from ``start`` along ``link`` until a 0 link."""
    seen = set()
    slot = start
    while True:
        if slot in seen:
            raise FormatError(f"section chain loops back to slot {slot + 1}")
        seen.add(slot)
        yield slot
        nxt = rd.u8(slot_offset(slot) + link)
        if not nxt:
            return
        if nxt > C.MAX_SECTIONS:
            raise FormatError(f"section link {nxt} past slot table")
        slot = nxt - 1


def build_combining(rd, event_id):
    out = []
    for head in event_slots(rd, event_id):
        if rd.u8(slot_offset(head) + PREV_COMBINE):
            continue
        with located(f"combining from slot {head + 1}"):
            combined = []
            for slot in _walk(rd, head, NEXT_COMBINE):
                if rd.u8(slot_offset(slot) + PREV_RANK):
                    continue
                combined.append(
                    [rd.pstring(slot_offset(s) + 1) for s in _walk(rd, slot, NEXT_RANK)]
                )
        out.append(combined)
    return out
