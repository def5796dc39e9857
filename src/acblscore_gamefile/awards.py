from . import const as C
from . import tables
from .model import Award, AwardSet, Pigmentation, RankEntry


def decode_pigmentation(rd, ofs):
    """Up to three (pct, mp, type) tiers; the first zero percentage ends the run."""
    n = C.MAX_PIGMENTATION
    pct = rd.u16_array(ofs, n)
    mp = rd.u16_array(ofs + 2 * n, n)
    tp = rd.u8_array(ofs + 4 * n, n)
    out = []
    for i in range(n):
        if not pct[i]:
            break
        out.append(
            Pigmentation(
                pct=pct[i] / 100, mp=mp[i] / 100, type=tables.pigmentation_type(tp[i])
            )
        )
    return out


def _reason(code, rank_str):
    if not code:
        return None
    scope = "S" if code >= 10 else "O"
    return scope + tables.strat_letter(rank_str, code % 10)


def decode_awards(rd, ofs, rank_str):
    """
    Previous/current/total award buckets, or None when every bucket is empty.

    No award at all is the usual outcome for most entries and players.
    """
    aws = AwardSet()
    any_award = False
    for i, bucket in enumerate(C.AWARD_BUCKETS):
        p = ofs + i * C.AWARD_BUCKET_SIZE
        out = getattr(aws, bucket)
        for j in range(C.MAX_AWARDS_PER_BUCKET):
            q = p + 4 * j
            amount = rd.u16(q)
            if not amount:
                break
            code = rd.u8(q + 3)
            out.append(
                Award(
                    amount=amount / 100,
                    type=tables.pigmentation_type(rd.u8(q + 2)),
                    reason=_reason(code, rank_str),
                    reason_code=code,
                )
            )
            any_award = True
    return aws if any_award else None


def decode_ranks(rd, ofs):
    out = []
    for i in range(C.MAX_STRATS):
        # trailing link words in each record are not decoded
        v = rd.u16_array(ofs + i * C.RANK_RECORD_SIZE, 6)
        if not v[5]:
            break
        out.append(
            RankEntry(
                section_rank_low=v[0],
                section_rank_high=v[1],
                overall_rank_low=v[2],
                overall_rank_high=v[3],
                qual_flag=v[4],
                rank=v[5],
            )
        )
    return out
