import pytest

from acblscore_gamefile.boards import decode_boards, normalize_score
from acblscore_gamefile.reader import Reader
from acblscore_gamefile.renumber import Renumbering


@pytest.mark.parametrize(
    "raw,expected",
    [
        (650, (6500, None)),
        (-42, (-420, None)),
        (0, (0, None)),
        (900, (None, "Late Play")),
        (950, (None, "Not Played")),
        (2040, (None, "Ave-")),
        (2050, (None, "Ave")),
        (2060, (None, "Ave+")),
        (1234, (None, "Unknown")),
    ],
)
def test_normalize_score(raw, expected):
    assert normalize_score(raw) == expected


def test_boards_skip_results_not_in_play(builder):
    idx = builder.add_boards(
        [
            (
                1,
                [
                    (1, 1, [(1, 42, 150), (3, -42, 50)]),
                    (2, 2, [(2, 999, 0), (4, 999, 0)]),
                    (3, 1, [(5, 2050, 100), (6, 2050, 100)]),
                ],
            ),
            (2, []),
        ]
    )
    boards = decode_boards(Reader(builder.data()), idx)
    assert sorted(boards) == [1, 2]
    assert boards[2] == []
    res = boards[1]
    assert len(res) == 2
    first = res[0]
    assert (first.round, first.table) == (1, 1)
    ns, ew = first.competitors
    assert (ns.number, ns.score, ns.special, ns.value) == (1, 420, None, 1.5)
    assert (ew.number, ew.score, ew.special, ew.value) == (3, -420, None, 0.5)
    assert [c.special for c in res[1].competitors] == ["Ave", "Ave"]


def test_mitchell_renumbering_is_direction_aware(builder):
    idx = builder.add_boards([(1, [(1, 1, [(2, 10, 0), (2, -10, 0)])])])
    # pair 2 N-S becomes 12, pair 2 E-W keeps its number
    renumber = Renumbering({(2, 0): 12}, per_direction=True)
    ns, ew = decode_boards(Reader(builder.data()), idx, renumber=renumber)[1][0].competitors
    assert ns.number == 12
    assert ew.number == 2


def test_howell_renumbering_ignores_direction(builder):
    idx = builder.add_boards([(1, [(1, 1, [(3, 10, 0), (5, -10, 0)])])])
    renumber = Renumbering({(5, 0): 9})
    ns, ew = decode_boards(Reader(builder.data()), idx, renumber=renumber)[1][0].competitors
    assert (ns.number, ew.number) == (3, 9)


def test_individual_results_have_four_competitors_and_no_renumbering(builder):
    comps = [(1, 30, 100), (2, -30, 0), (3, 30, 100), (4, -30, 0)]
    idx = builder.add_boards([(7, [(1, 1, comps)])], ncomp=4)
    renumber = Renumbering({(1, 0): 20}, per_direction=True)
    res = decode_boards(Reader(builder.data()), idx, is_individual=True, renumber=renumber)
    assert [c.number for c in res[7][0].competitors] == [1, 2, 3, 4]
