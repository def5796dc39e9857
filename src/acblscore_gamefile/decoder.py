"""
Top-level scan of an ACBLscore game file.

    from acblscore_gamefile.decoder import decode_gamefile
    gm = decode_gamefile(data, noboards=True)
    for ev in gm.events:
        print(ev.event_id, ev.event_name, sorted(ev.sections))

The file starts with a 6-byte signature, followed by a table of 50 event
pointers (0 = unused slot). Everything else is reached by following those
pointers and the section summary table.
"""

from . import const as C
from .context import DecodeContext
from .errors import FormatError
from .event import decode_event
from .log import get_logger
from .model import Gamefile
from .options import DecodeOptions
from .reader import Reader

log = get_logger(__name__)


def check_magic(data):
    if bytes(data[: len(C.MAGIC)]) != C.MAGIC:
        raise FormatError("not an ACBLscore game file (bad signature)")


def event_pointers(rd):
    """(slot, pointer) for every populated event slot."""
    out = []
    for i in range(C.MAX_EVENTS):
        p = rd.u32(C.EVENT_PTR_TABLE + 4 * i)
        if p:
            out.append((i, p))
    return out


def decode_gamefile(data, options=None, **flags):
    """
    Decode a whole game file buffer.

    ``options`` is a DecodeOptions; keyword flags use the short option names
    (``sectionsonly``, ``noentries``, ``noboards``) and are ignored when
    ``options`` is given.
    """
    check_magic(data)
    if options is None:
        options = DecodeOptions.from_keywords(**flags)
    rd = Reader(data)
    ctx = DecodeContext(reader=rd, options=options)
    gm = Gamefile()
    for slot, p in event_pointers(rd):
        gm.events.append(decode_event(ctx, slot, p))
    log.debug("decoded %d event(s) from %d bytes", len(gm.events), len(rd))
    return gm
