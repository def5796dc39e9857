"""
Decoded, read-only view of an ACBLscore game file.

Shape:
    Gamefile
      events: [Event]
        strats: [Strat] -> pigmentation per scope
        combining: [[[section letter]]]   combinations > rank groups > letters
        sections: {letter: Section}
          entries: {key: Entry} -> players, awards, ranks
          boards: {board number: [BoardResult]}
          matches: {team number: [TeamMatch]}
"""

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional

from . import const as C


@dataclass
class Pigmentation:
    pct: float
    mp: float
    type: str


@dataclass
class Strat:
    letter: str
    first_overall_award: float
    ribbon_color: str
    ribbon_depth: int
    mpt_factor: float
    overall_award_depth: int
    table_basis: int
    min_mp: int
    max_mp: int
    club_pct_open_rating: int
    pigmentation_overall: List[Pigmentation] = field(default_factory=list)
    pigmentation_session: List[Pigmentation] = field(default_factory=list)
    pigmentation_section: List[Pigmentation] = field(default_factory=list)


@dataclass
class Award:
    amount: float
    type: str
    # "S" or "O" followed by the strat letter; None when no reason was recorded.
    reason: Optional[str]
    reason_code: int


@dataclass
class AwardSet:
    previous: List[Award] = field(default_factory=list)
    current: List[Award] = field(default_factory=list)
    total: List[Award] = field(default_factory=list)


@dataclass
class RankEntry:
    section_rank_low: int
    section_rank_high: int
    overall_rank_low: int
    overall_rank_high: int
    qual_flag: int
    rank: int


@dataclass
class Player:
    lname: str
    fname: str
    city: str
    state: str
    pnum: str
    db_key: str
    country: str
    team_wins: float
    mp_total: int
    acbl_rank_letter: Optional[str]
    acbl_rank: Optional[str]
    award: Optional[AwardSet] = None


@dataclass
class Entry:
    score_adjustment: float
    score_unscaled: float
    score_session: Optional[float]
    score_carryover: float
    score_final: Optional[float]
    score_handicap: float
    pct: float
    strat_num: int
    mp_average: int
    nboards: int
    eligibility: int
    award: Optional[AwardSet] = None
    rank: List[RankEntry] = field(default_factory=list)
    players: List[Player] = field(default_factory=list)


@dataclass
class CompetitorResult:
    number: int
    # Points scored; None when the raw value was a special code.
    score: Optional[int]
    special: Optional[str]
    value: float


@dataclass
class BoardResult:
    round: int
    table: int
    competitors: List[CompetitorResult] = field(default_factory=list)


@dataclass
class TeamMatch:
    round: int
    vs_team: int
    imps: int
    vps: float
    nboards: int
    wins: float


@dataclass
class Section:
    letter: str
    rounds: int
    is_teams: bool
    is_individual: bool
    is_howell: bool
    boards_per_round: int
    ntables: int
    maximum_score: int
    movement_type: Optional[str] = None
    match_award: Optional[float] = None
    is_barometer: Optional[int] = None
    is_web: Optional[int] = None
    is_bam: Optional[int] = None
    nboards: Optional[int] = None
    highest_pairnum: Optional[int] = None
    max_results_per_board: Optional[int] = None
    board_top: Optional[int] = None
    nteams: Optional[int] = None
    entries: Dict[str, Entry] = field(default_factory=dict)
    boards: Dict[int, List[BoardResult]] = field(default_factory=dict)
    matches: Dict[int, List[TeamMatch]] = field(default_factory=dict)

    def entry(self, key):
        return self.entries[str(key)]


@dataclass
class Event:
    event_id: int
    event_type_id: int
    event_type: str
    event_scoring_id: int
    event_scoring: str
    p_factor: float
    t_factor: float
    s_factor: float
    tournament_flag: bool
    session_num: int
    nstrats: int
    nsessions: int
    final_session_flag: bool
    side_game_flag: int
    stratify_by_avg_flag: int
    non_acbl_flag: int
    event_name: str
    session_name: str
    sanction: str
    date: str
    event_code: str
    qual_event_code: str
    hand_set: str
    director: Optional[str] = None
    city: Optional[str] = None
    club_name: Optional[str] = None
    tournament_name: Optional[str] = None
    club_num: Optional[str] = None
    club_session_num: Optional[int] = None
    club_game_type: Optional[str] = None
    nbrackets: Optional[int] = None
    bracket_num: Optional[int] = None
    strats: List[Strat] = field(default_factory=list)
    combining: List[List[List[str]]] = field(default_factory=list)
    sections: Dict[str, Section] = field(default_factory=dict)

    @property
    def rank_str(self):
        return "".join(st.letter for st in self.strats)

    @property
    def is_teams(self):
        return self.event_type_id in C.TEAM_EVENT_TYPES


@dataclass
class Gamefile:
    events: List[Event] = field(default_factory=list)

    def event(self, event_id):
        for ev in self.events:
            if ev.event_id == event_id:
                return ev
        raise KeyError(event_id)

    def as_dict(self):
        return asdict(self)
