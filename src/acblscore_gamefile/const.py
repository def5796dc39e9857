MAGIC = b"\x12\x0a\x03AC3"
TEXT_ENCODING = "latin-1"

MAX_EVENTS = 50
MAX_SECTIONS = 100

EVENT_PTR_TABLE = 0x12
EVENT_TYPE_IDS = 0xDA
EVENT_SCORING_IDS = 0x10C

SECTION_SUMMARY_BASE = 0x13E
SECTION_SUMMARY_SIZE = 22

STRAT_BASE = 0xD4
STRAT_STRUCTURE_SIZE = 95
ENTRY_PLAYER_BASE = 0xA4
ENTRY_FIXED_SIZE = 0xA2
PLAYER_STRUCTURE_SIZE = 120
TEAM_MATCH_BASE = 0x22
TEAM_MATCH_ENTRY_SIZE = 32
BOARD_INDEX_BASE = 0x26
BOARD_INDEX_SIZE = 8
RANK_RECORD_SIZE = 20
AWARD_BUCKET_SIZE = 12

MAX_STRATS = 3
MAX_AWARDS_PER_BUCKET = 3
MAX_PIGMENTATION = 3
VALID_PLAYER_COUNTS = (1, 2, 6)

PIGMENTATION_TYPES = "BSRGP"
DIRECTION_LETTERS = "NESW"
AWARD_BUCKETS = ("previous", "current", "total")

MOVEMENT_HOWELL = 1
NOT_IN_PLAY = 999
SPECIAL_SCORE_MIN = 900
UNKNOWN_SCORE = "Unknown"

# Howell maps hold one byte per pair, Mitchell maps four (one per direction).
HOWELL_RENUMBER_SIZE = 80
MITCHELL_RENUMBER_SIZE = 160
PAIR_MAP_BASE = 0xDD
HOWELL_SEATING = 0x50
MITCHELL_SEATING = 0xA0

TEAM_EVENT_TYPES = (1, 4)

EVENT_TYPES = {
    0: "Pairs",
    1: "Teams",
    2: "Individual",
    3: "Home Style Pairs",
    4: "BAM",
    5: "Series Winner",
}

SCORING_METHODS = {
    0: "Matchpoints",
    1: "IMPs with computed datum",
    2: "Average IMPs",
    3: "Total IMPs",
    4: "Instant Matchpoints",
    5: "BAM Teams",
    6: "Win/Loss",
    7: "Victory Points",
    8: "Knockout",
    10: "Series Winner",
    16: "BAM Matchpoints",
    18: "Compact KO",
}

CLUB_GAME_TYPES = {
    0: "Open",
    1: "Invitational",
    2: "Novice",
    3: "BridgePlus",
    4: "Pupil",
    5: "Introductory",
}

MOVEMENT_TYPES = {
    0: "Mitchell",
    1: "Howell",
    2: "Web",
    3: "External",
    4: "External BAM",
    5: "Barometer",
    6: "Manual Mitchell",
    7: "Manual Howell",
}

RIBBON_COLORS = {
    0: "",
    1: "Blue",
    2: "Red",
    3: "Silver",
    9: "Blue/Red",
}

ACBL_RANKS = {
    " ": "Rookie",
    "A": "Junior Master",
    "B": "Club Master",
    "C": "Sectional Master",
    "D": "Regional Master",
    "E": "NABC Master",
    "F": "Advanced NABC Master",
    "G": "Life Master",
    "H": "Bronze Life Master",
    "I": "Silver Life Master",
    "J": "Gold Life Master",
    "K": "Diamond Life Master",
    "L": "Emerald Life Master",
    "M": "Platinum Life Master",
    "N": "Grand Life Master",
}

SPECIAL_SCORES = {
    900: "Late Play",
    950: "Not Played",
    2040: "Ave-",
    2050: "Ave",
    2060: "Ave+",
}

OPTIONS_ENV = "ACBLSCORE_DECODE_OPTS"
