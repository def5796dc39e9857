import struct

import pytest

MAGIC = b"\x12\x0a\x03AC3"
SUMMARY_BASE = 0x13E
SUMMARY_SIZE = 22
PLAYER_SIZE = 120


class GamefileBuilder:
    """Lays out a synthetic ACBLscore game file one structure at a time."""

    def __init__(self, size=0x8000):
        self.buf = bytearray(size)
        self.buf[0:6] = MAGIC
        # past the section summary table
        self.top = 0xA00

    def alloc(self, n):
        p = self.top
        self.top += (n + 15) & ~15
        assert self.top <= len(self.buf), "builder buffer exhausted"
        return p

    def data(self):
        return bytes(self.buf)

    def put(self, fmt, ofs, *vals):
        struct.pack_into("<" + fmt, self.buf, ofs, *vals)

    def u8(self, ofs, v):
        self.put("B", ofs, v)

    def i8(self, ofs, v):
        self.put("b", ofs, v)

    def u16(self, ofs, v):
        self.put("H", ofs, v)

    def i16(self, ofs, v):
        self.put("h", ofs, v)

    def u32(self, ofs, v):
        self.put("I", ofs, v)

    def i32(self, ofs, v):
        self.put("i", ofs, v)

    def pstr(self, ofs, s):
        b = s.encode("latin-1")
        self.buf[ofs] = len(b)
        self.buf[ofs + 1 : ofs + 1 + len(b)] = b

    def add_event(
        self,
        slot,
        type_id=0,
        scoring_id=0,
        name="Open Pairs",
        club_session=0,
        session=1,
        nsessions=1,
        strats="A",
    ):
        p = self.alloc(0x300)
        self.u32(0x12 + 4 * slot, p)
        self.u8(0xDA + slot, type_id)
        self.u8(0x10C + slot, scoring_id)
        self.pstr(p + 0x04, name)
        self.u8(p + 0x8C, session)
        self.u8(p + 0x95, club_session)
        self.u8(p + 0x9E, len(strats))
        self.u8(p + 0x9F, nsessions)
        for i, letter in enumerate(strats):
            self.buf[self.strat_ofs(p, i) + 0x22] = ord(letter)
        return p

    @staticmethod
    def strat_ofs(event_ofs, i):
        return event_ofs + 0xD4 + i * 95

    def add_section_slot(
        self,
        slot,
        event_id,
        letter,
        details=0,
        boards=0,
        prev_combine=0,
        next_combine=0,
        prev_rank=0,
        next_rank=0,
        rounds=0,
    ):
        s = SUMMARY_BASE + SUMMARY_SIZE * slot
        self.u8(s, event_id)
        self.pstr(s + 1, letter)
        self.u32(s + 4, details)
        self.u32(s + 8, boards)
        self.u8(s + 0x0F, prev_combine)
        self.u8(s + 0x10, next_combine)
        self.u8(s + 0x11, prev_rank)
        self.u8(s + 0x12, next_rank)
        self.u8(s + 0x14, rounds)
        return s

    def add_details(self, index=(0, 0, 0, 0), movement=0, highest_pairnum=0, phantom=0):
        d = self.alloc(0x250)
        for i, v in enumerate(index):
            self.u32(d + 4 + 4 * i, v)
        self.u8(d + 0x18, movement)
        self.u16(d + 0x1B, highest_pairnum)
        self.i8(d + 0x43, phantom)
        return d

    def add_entry_index(self, ptrs):
        """``ptrs`` maps table number -> entry pointer."""
        base = self.alloc(0x10 + 8 * (max(ptrs) + 1))
        for table, ptr in ptrs.items():
            self.u32(base + 0x10 + 8 * table, ptr)
        return base

    def add_entry(self, nplayers=2, scores=(0, 0, 0, 0, 0, 0), pct=0, players=(), size=None):
        e = self.alloc(0xA4 + PLAYER_SIZE * nplayers)
        self.u16(e, 0xA2 + PLAYER_SIZE * nplayers if size is None else size)
        for i, v in enumerate(scores):
            self.i32(e + 4 + 4 * i, v)
        self.u16(e + 0x1C, pct)
        for i, (lname, fname) in enumerate(players):
            q = self.player_ofs(e, i)
            self.pstr(q, lname)
            self.pstr(q + 0x11, fname)
        return e

    @staticmethod
    def player_ofs(entry_ofs, i):
        return entry_ofs + 0xA4 + PLAYER_SIZE * i

    def add_boards(self, boards, ncomp=2):
        """``boards``: [(board number, [(round, table, [(number, raw, value), ...]), ...]), ...]"""
        idx = self.alloc(0x26 + 8 * len(boards))
        self.u16(idx + 4, len(boards))
        rsize = 2 + 8 * ncomp
        for i, (bnum, results) in enumerate(boards):
            r = self.alloc(6 + rsize * len(results))
            rec = idx + 0x26 + 8 * i
            self.u16(rec, bnum)
            self.u16(rec + 2, len(results))
            self.u32(rec + 4, r)
            for j, (rnd, tbl, comps) in enumerate(results):
                q = r + 6 + j * rsize
                self.u8(q, rnd)
                self.u8(q + 1, tbl)
                for k, (num, raw, val) in enumerate(comps):
                    c = q + 2 + 8 * k
                    self.u16(c, num)
                    self.i16(c + 2, raw)
                    self.i32(c + 4, val)
        return idx

    def add_team_index(self, teams):
        """``teams``: [(team number, roster size, entry pointer), ...]"""
        t = self.alloc(0x14 + 8 * len(teams))
        self.u8(t + 6, len(teams))
        for i, (num, roster, ptr) in enumerate(teams):
            q = t + 0x14 + 8 * i
            self.u16(q, num)
            self.u16(q + 2, roster)
            self.u32(q + 4, ptr)
        return t

    def add_team_matches(self, nrounds, per_team):
        """``per_team``: one list per team of (round, vs, imps, vps, nboards, wins)."""
        m = self.alloc(0x56 + 4 * len(per_team))
        self.u16(m + 4, len(per_team))
        self.u16(m + 6, nrounds)
        for i, matches in enumerate(per_team):
            tbl = self.alloc(0x22 + 32 * len(matches))
            self.u32(m + 0x56 + 4 * i, tbl)
            self.u8(tbl + 4, len(matches))
            for j, (rnd, vs, imps, vps, nb, wins) in enumerate(matches):
                q = tbl + 0x22 + 32 * j
                self.u8(q + 1, rnd)
                self.u16(q + 2, vs)
                self.i16(q + 8, imps)
                self.u16(q + 0x0A, vps)
                self.u8(q + 0x0D, nb)
                self.u16(q + 0x16, wins)
        return m

    def add_mitchell_section(self, slot, event_id, letter, npairs=2, phantom=0, boards=0):
        """Mitchell pairs section, pair n sits N-S and E-W at table n."""
        ns = {t: self.add_entry(players=[("NS%d" % t, "North")]) for t in range(1, npairs + 1)}
        ew = {t: self.add_entry(players=[("EW%d" % t, "East")]) for t in range(1, npairs + 1)}
        d = self.add_details(
            index=(self.add_entry_index(ns), self.add_entry_index(ew), 0, 0),
            movement=0,
            highest_pairnum=npairs,
            phantom=phantom,
        )
        for pair in range(1, npairs + 1):
            self.u8(d + 0xDD + 0xA0 + 4 * (pair - 1), pair)
            self.u8(d + 0xDD + 0xA0 + 4 * (pair - 1) + 1, pair)
        self.add_section_slot(slot, event_id, letter, details=d, boards=boards)
        return d


@pytest.fixture
def builder():
    return GamefileBuilder()
