from . import const as C
from . import tables
from .awards import decode_pigmentation
from .combining import build_combining, event_slots
from .errors import located
from .log import get_logger
from .model import Event, Strat
from .section import decode_section

log = get_logger(__name__)


def decode_strat(rd, p):
    return Strat(
        letter=rd.char(p + 0x22),
        first_overall_award=rd.u16(p + 0x10) / 100,
        ribbon_color=tables.ribbon_color(rd.u8(p + 0x12)),
        ribbon_depth=rd.u8(p + 0x13),
        mpt_factor=rd.u32(p + 0x14) / 10000,
        overall_award_depth=rd.u16(p + 0x18),
        table_basis=rd.u8(p + 0x1A),
        min_mp=rd.u16(p + 0x1E),
        max_mp=rd.u16(p + 0x20),
        club_pct_open_rating=rd.u8(p + 0x23),
        pigmentation_overall=decode_pigmentation(rd, p + 0x32),
        pigmentation_session=decode_pigmentation(rd, p + 0x41),
        pigmentation_section=decode_pigmentation(rd, p + 0x50),
    )


def decode_event_header(rd, slot, p):
    type_id = rd.u8(C.EVENT_TYPE_IDS + slot)
    scoring_id = rd.u8(C.EVENT_SCORING_IDS + slot)
    club_session = rd.u8(p + 0x95)
    # No club session number is taken to mean a tournament. This is a
    # heuristic; a missing club number would be another possible signal.
    is_tourney = club_session == 0
    session_num = rd.u8(p + 0x8C)
    nstrats = rd.u8(p + 0x9E)
    nsessions = rd.u8(p + 0x9F)
    ev = Event(
        event_id=slot + 1,
        event_type_id=type_id,
        event_type=tables.event_type(type_id),
        event_scoring_id=scoring_id,
        event_scoring=tables.scoring_method(scoring_id),
        p_factor=rd.u16(p + 0x7D) / 1000,
        t_factor=rd.u16(p + 0x83) / 1000,
        s_factor=rd.u16(p + 0x24F) / 100,
        tournament_flag=is_tourney,
        session_num=session_num,
        nstrats=nstrats,
        nsessions=nsessions,
        final_session_flag=session_num == nsessions,
        side_game_flag=rd.u8(p + 0x253),
        stratify_by_avg_flag=rd.u8(p + 0x2C8),
        non_acbl_flag=rd.u8(p + 0x2CA),
        event_name=rd.pstring(p + 0x04),
        session_name=rd.pstring(p + 0x1E),
        sanction=rd.pstring(p + 0x3D),
        date=rd.pstring(p + 0x48),
        event_code=rd.pstring(p + 0x76),
        qual_event_code=rd.pstring(p + 0xC5),
        hand_set=rd.pstring(p + 0x244),
    )
    if is_tourney:
        ev.city = rd.pstring(p + 0x2C)
        ev.tournament_name = rd.pstring(p + 0x5C)
    else:
        ev.director = rd.pstring(p + 0x2C)
        ev.club_name = rd.pstring(p + 0x5C)
        ev.club_num = rd.pstring(p + 0xB0)
        ev.club_session_num = club_session
        ev.club_game_type = tables.club_game_type(rd.u8(p + 0xA1))
    if ev.is_teams:
        ev.nbrackets = rd.u8(p + 0xC2)
        ev.bracket_num = rd.u8(p + 0xC3)
    for i in range(nstrats):
        with located(f"strat {i + 1}"):
            ev.strats.append(decode_strat(rd, p + C.STRAT_BASE + i * C.STRAT_STRUCTURE_SIZE))
    return ev


def decode_event(ctx, slot, p):
    rd = ctx.reader
    with located(f"event {slot + 1}"):
        ev = decode_event_header(rd, slot, p)
        ectx = ctx.for_event(ev.rank_str)
        ev.combining = build_combining(rd, ev.event_id)
        for s in event_slots(rd, ev.event_id):
            sc = decode_section(ectx, s)
            ev.sections[sc.letter] = sc
    log.debug(
        "event %d (%s, %s): %d section(s), rank string %r",
        ev.event_id,
        ev.event_type,
        ev.event_scoring,
        len(ev.sections),
        ev.rank_str,
    )
    return ev
