from . import const as C
from .errors import UnknownCode


def _lookup(table, name, code):
    try:
        return table[code]
    except KeyError:
        raise UnknownCode(name, code) from None


def event_type(code):
    return _lookup(C.EVENT_TYPES, "event type", code)


def scoring_method(code):
    return _lookup(C.SCORING_METHODS, "scoring method", code)


def club_game_type(code):
    return _lookup(C.CLUB_GAME_TYPES, "club game type", code)


def movement_type(code):
    return _lookup(C.MOVEMENT_TYPES, "movement type", code)


def ribbon_color(code):
    return _lookup(C.RIBBON_COLORS, "ribbon color", code)


def acbl_rank(letter):
    return _lookup(C.ACBL_RANKS, "ACBL rank", letter)


def special_score(code):
    return _lookup(C.SPECIAL_SCORES, "special score", code)


def pigmentation_type(code):
    if 0 <= code < len(C.PIGMENTATION_TYPES):
        return C.PIGMENTATION_TYPES[code]
    raise UnknownCode("pigmentation type", code)


def strat_letter(rank_str, position):
    """
    1-based position into the event's rank string.

    Position 0 wraps to the last strat; a position past the end has no letter.
    """
    if position == 0:
        return rank_str[-1:]
    return rank_str[position - 1 : position]
