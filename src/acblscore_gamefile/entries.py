from . import const as C
from . import tables
from .awards import decode_awards, decode_ranks
from .errors import FormatError, located
from .model import Entry, Player

_NOT_APPLICABLE = -1


def decode_player(rd, ofs, rank_str):
    letter = rd.char(ofs + 0x73)
    if letter == "\0":
        letter = None
        rank_name = None
    else:
        rank_name = tables.acbl_rank(letter)
    return Player(
        lname=rd.pstring(ofs),
        fname=rd.pstring(ofs + 0x11),
        city=rd.pstring(ofs + 0x22),
        state=rd.pstring(ofs + 0x33),
        pnum=rd.pstring(ofs + 0x36),
        db_key=rd.pstring(ofs + 0x3E),
        country=rd.pstring(ofs + 0x75),
        team_wins=rd.u16(ofs + 0x44) / 100,
        mp_total=rd.u16(ofs + 0x71),
        acbl_rank_letter=letter,
        acbl_rank=rank_name,
        award=decode_awards(rd, ofs + 0x48, rank_str),
    )


def infer_player_count(size: int) -> int:
    """
    Player slots implied by an entry's structure size field.

    Only used when no roster size is known: the team index carries the
    authoritative count for team entries, pair and individual entries rely
    on this. Yields 1 (individual), 2 (pair) or 6 (team).
    """
    n, rem = divmod(size - C.ENTRY_FIXED_SIZE, C.PLAYER_STRUCTURE_SIZE)
    if rem or n not in C.VALID_PLAYER_COUNTS:
        raise FormatError(f"entry structure size {size} does not fit 1, 2 or 6 players")
    return n


def _score(v):
    return None if v == _NOT_APPLICABLE else v / 100


def decode_entry(rd, ofs, rank_str, nplayers=0):
    sc = rd.i32_array(ofs + 0x04, 6)
    ent = Entry(
        score_adjustment=sc[0] / 100,
        score_unscaled=sc[1] / 100,
        score_session=_score(sc[2]),
        score_carryover=sc[3] / 100,
        score_final=_score(sc[4]),
        score_handicap=sc[5] / 100,
        pct=rd.u16(ofs + 0x1C) / 100,
        strat_num=rd.u8(ofs + 0x1E),
        mp_average=rd.u16(ofs + 0x20),
        nboards=rd.u8(ofs + 0x2F),
        eligibility=rd.u8(ofs + 0x33),
        award=decode_awards(rd, ofs + 0x34, rank_str),
        rank=decode_ranks(rd, ofs + 0x5E),
    )
    if not nplayers:
        nplayers = infer_player_count(rd.u16(ofs))
    for i in range(nplayers):
        with located(f"player {i + 1}"):
            ent.players.append(
                decode_player(
                    rd, ofs + C.ENTRY_PLAYER_BASE + i * C.PLAYER_STRUCTURE_SIZE, rank_str
                )
            )
    return ent
