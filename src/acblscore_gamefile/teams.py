from . import const as C
from .errors import FormatError, located
from .log import get_logger
from .model import TeamMatch

log = get_logger(__name__)


def read_team_index(rd, index_ofs, nteams):
    """(team number, roster size, entry pointer) per team, in entry-id order."""
    out = []
    for i in range(nteams):
        p = index_ofs + 0x14 + 8 * i
        out.append((rd.u16(p), rd.u16(p + 2), rd.u32(p + 4)))
    return out


def decode_team_matches(rd, ofs, index_ofs):
    """
    Round-by-round match history keyed by team number.

    Teams knocked out of a knockout play fewer matches than there are
    rounds, so each team carries its own match count.
    """
    nteams = rd.u16(ofs + 4)
    nrounds = rd.u16(ofs + 6)
    team_nums = [t[0] for t in read_team_index(rd, index_ofs, nteams)]
    out = {}
    for i, team in enumerate(team_nums):
        with located(f"team {team}"):
            tbl = rd.u32(ofs + 0x56 + 4 * i)
            if not tbl:
                log.debug("team %d has no match table", team)
                continue
            nmatches = rd.u8(tbl + 4)
            if nmatches > nrounds:
                raise FormatError(f"{nmatches} matches recorded for {nrounds} rounds")
            matches = []
            for j in range(nmatches):
                p = tbl + C.TEAM_MATCH_BASE + j * C.TEAM_MATCH_ENTRY_SIZE
                matches.append(
                    TeamMatch(
                        round=rd.u8(p + 1),
                        vs_team=rd.u16(p + 2),
                        imps=rd.i16(p + 8),
                        vps=rd.u16(p + 0x0A) / 100,
                        nboards=rd.u8(p + 0x0D),
                        wins=rd.u16(p + 0x16) / 100,
                    )
                )
        out[team] = matches
    return out
