"""
Bounds-checked typed reads over the game file buffer.

Every decoder reads through a single ``Reader``; nothing indexes the raw
bytes directly. Offsets are absolute and all integers are little-endian.
"""

import struct

from . import const as C
from .errors import OutOfBounds

_U8 = struct.Struct("<B")
_I8 = struct.Struct("<b")
_U16 = struct.Struct("<H")
_I16 = struct.Struct("<h")
_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")


class Reader:
    __slots__ = ("data",)

    def __init__(self, data):
        self.data = bytes(data)

    def __len__(self):
        return len(self.data)

    def _check(self, ofs: int, width: int):
        if ofs < 0 or ofs + width > len(self.data):
            raise OutOfBounds(ofs, width, len(self.data))

    def _unpack(self, st, ofs):
        self._check(ofs, st.size)
        return st.unpack_from(self.data, ofs)[0]

    def u8(self, ofs: int) -> int:
        return self._unpack(_U8, ofs)

    def i8(self, ofs: int) -> int:
        return self._unpack(_I8, ofs)

    def u16(self, ofs: int) -> int:
        return self._unpack(_U16, ofs)

    def i16(self, ofs: int) -> int:
        return self._unpack(_I16, ofs)

    def u32(self, ofs: int) -> int:
        return self._unpack(_U32, ofs)

    def i32(self, ofs: int) -> int:
        return self._unpack(_I32, ofs)

    def raw(self, ofs: int, n: int) -> bytes:
        self._check(ofs, n)
        return self.data[ofs : ofs + n]

    def u8_array(self, ofs: int, n: int):
        return list(self.raw(ofs, n))

    def u16_array(self, ofs: int, n: int):
        self._check(ofs, 2 * n)
        return list(struct.unpack_from("<%dH" % n, self.data, ofs))

    def i32_array(self, ofs: int, n: int):
        self._check(ofs, 4 * n)
        return list(struct.unpack_from("<%di" % n, self.data, ofs))

    def pstring(self, ofs: int) -> str:
        """Length byte followed by exactly that many bytes, no terminator."""
        n = self.u8(ofs)
        return self.raw(ofs + 1, n).decode(C.TEXT_ENCODING)

    def char(self, ofs: int) -> str:
        return self.raw(ofs, 1).decode(C.TEXT_ENCODING)
