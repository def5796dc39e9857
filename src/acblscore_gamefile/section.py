from . import const as C
from . import tables
from .boards import decode_boards
from .combining import slot_offset
from .entries import decode_entry
from .errors import FormatError, located
from .log import get_logger
from .model import Section
from .renumber import Renumbering
from .teams import decode_team_matches, read_team_index

log = get_logger(__name__)


def _entry_ptr(rd, index, direction, table):
    if not 0 <= direction < len(index) or not index[direction]:
        raise FormatError(f"no entry index for direction {direction + 1}")
    return rd.u32(index[direction] + 0x10 + 8 * table)


def _howell_entries(ctx, sc, d, index, phantom, renumber):
    rd = ctx.reader
    seating = d + C.PAIR_MAP_BASE + C.HOWELL_SEATING
    for pair in range(1, sc.highest_pairnum + 1):
        if pair == phantom:
            continue
        table = rd.u8(seating + 2 * (pair - 1))
        direction = rd.u8(seating + 2 * (pair - 1) + 1)
        key = str(renumber.apply(pair))
        with located(f"entry {key}"):
            ptr = _entry_ptr(rd, index, direction - 1, table)
            if not ptr:
                log.debug("section %s pair %d has no entry", sc.letter, pair)
                continue
            sc.entries[key] = decode_entry(rd, ptr, ctx.rank_str)


def _mitchell_entries(ctx, sc, d, index, phantom, renumber):
    rd = ctx.reader
    seating = d + C.PAIR_MAP_BASE + C.MITCHELL_SEATING
    ndir = 4 if sc.is_individual else 2
    for pair in range(1, sc.highest_pairnum + 1):
        for j in range(ndir):
            # phantom is positive when the N-S pair is missing, negative for E-W
            if (pair == phantom and j == 0) or (pair == -phantom and j == 1):
                continue
            table = rd.u8(seating + 4 * (pair - 1) + j)
            key = "%d%s" % (renumber.apply(pair, j), C.DIRECTION_LETTERS[j])
            with located(f"entry {key}"):
                ptr = _entry_ptr(rd, index, j, table)
                if not ptr:
                    log.debug("section %s seat %d%s has no entry", sc.letter, pair, C.DIRECTION_LETTERS[j])
                    continue
                sc.entries[key] = decode_entry(rd, ptr, ctx.rank_str)


def _team_entries(ctx, sc, index):
    rd = ctx.reader
    for team, roster, ptr in read_team_index(rd, index[0], sc.nteams):
        if not ptr:
            log.debug("section %s team %d has no entry", sc.letter, team)
            continue
        with located(f"entry {team}"):
            sc.entries[str(team)] = decode_entry(rd, ptr, ctx.rank_str, nplayers=roster)


def decode_section(ctx, slot):
    rd = ctx.reader
    s = slot_offset(slot)
    letter = rd.pstring(s + 1)
    with located(f"section {letter}"):
        return _decode_section(ctx, s, letter)


def _decode_section(ctx, s, letter):
    rd = ctx.reader
    opt = ctx.options
    rounds = rd.u8(s + 0x14)
    board_ofs = rd.u32(s + 8)
    d = rd.u32(s + 4)

    # N-S (or team) index, E-W index, then the extra directions of an individual
    index = [rd.u32(d + 4 + 4 * i) for i in range(4)]
    is_teams = index[1] == 0
    is_indy = index[2] != 0
    mv = rd.u8(d + 0x18)
    is_howell = not is_teams and mv == C.MOVEMENT_HOWELL

    sc = Section(
        letter=letter,
        rounds=rounds,
        is_teams=is_teams,
        is_individual=is_indy,
        is_howell=is_howell,
        boards_per_round=rd.u8(d + 0x1D),
        ntables=rd.u16(d + 0x48),
        maximum_score=rd.u16(d + 0x4E),
    )
    if is_teams:
        sc.movement_type = tables.movement_type(mv)
        sc.match_award = rd.u16(d + 0xB5) / 100
    else:
        sc.is_barometer = rd.u8(d + 0x47)
        sc.is_web = rd.u8(d + 0x60)
        sc.is_bam = rd.u8(d + 0xD5)
        sc.nboards = rd.u16(d + 0x19)
        sc.highest_pairnum = rd.u16(d + 0x1B)
        sc.max_results_per_board = rd.u8(d + 0x61)
        sc.board_top = rd.u16(d + 0x1E)

    if opt.sections_only:
        return sc

    if is_teams:
        if not index[0]:
            raise FormatError("team section without a team index")
        sc.nteams = rd.u8(index[0] + 6)
        if not opt.no_entries:
            _team_entries(ctx, sc, index)
        if not opt.no_boards and board_ofs:
            sc.boards = decode_boards(rd, board_ofs)
        tm = rd.u32(d + 0x23D)
        if tm:
            sc.matches = decode_team_matches(rd, tm, index[0])
        log.debug("section %s: %d teams, %d entries", letter, sc.nteams, len(sc.entries))
        return sc

    phantom = rd.i8(d + 0x43)
    renumber = Renumbering.read(rd, d, is_howell)
    if not opt.no_entries:
        if is_howell:
            _howell_entries(ctx, sc, d, index, phantom, renumber)
        else:
            _mitchell_entries(ctx, sc, d, index, phantom, renumber)
    if not opt.no_boards and board_ofs:
        sc.boards = decode_boards(rd, board_ofs, is_indy, renumber)
    log.debug(
        "section %s: %s, %d entries, %d boards",
        letter,
        "howell" if is_howell else "mitchell",
        len(sc.entries),
        len(sc.boards),
    )
    return sc
