from . import const as C
from . import tables
from .errors import UnknownCode, located
from .log import get_logger
from .model import BoardResult, CompetitorResult
from .renumber import NO_RENUMBERING

log = get_logger(__name__)


def normalize_score(raw):
    """
    Raw board score -> (points, special label).

    Raw values below 900 are tenths of the real score. Codes from 900 up are
    special outcomes (late play, not played, averages); a code missing from
    the table comes back as the UNKNOWN_SCORE label.
    """
    if raw < C.SPECIAL_SCORE_MIN:
        return raw * 10, None
    try:
        return None, tables.special_score(raw)
    except UnknownCode:
        log.debug("unmapped special score %d", raw)
        return None, C.UNKNOWN_SCORE


def decode_boards(rd, ofs, is_individual=False, renumber=NO_RENUMBERING):
    ncomp = 4 if is_individual else 2
    rsize = 2 + 8 * ncomp
    # Renumbering inside individual events is not known to occur.
    if is_individual:
        renumber = NO_RENUMBERING
    nboards = rd.u16(ofs + 4)
    out = {}
    for i in range(nboards):
        rec = ofs + C.BOARD_INDEX_BASE + i * C.BOARD_INDEX_SIZE
        bnum = rd.u16(rec)
        nresults = rd.u16(rec + 2)
        p = rd.u32(rec + 4) + 6
        with located(f"board {bnum}"):
            results = []
            for j in range(nresults):
                r = p + j * rsize
                if rd.i16(r + 4) == C.NOT_IN_PLAY:
                    continue
                res = BoardResult(round=rd.u8(r), table=rd.u8(r + 1))
                for k in range(ncomp):
                    c = r + 2 + 8 * k
                    # first competitor sits N-S, second E-W
                    num = renumber.apply(rd.u16(c), k)
                    score, special = normalize_score(rd.i16(c + 2))
                    res.competitors.append(
                        CompetitorResult(
                            number=num,
                            score=score,
                            special=special,
                            value=rd.i32(c + 4) / 100,
                        )
                    )
                results.append(res)
        out[bnum] = results
    return out
