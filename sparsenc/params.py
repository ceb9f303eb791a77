"""Code parameters, type enumerations and packet structures for sparse network codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class CodeType(IntEnum):
    """How source packets are grouped into subgenerations (or batches)."""

    RAND = 0
    BAND = 1
    WINDWRAP = 2
    BATS = 3
    RAPTOR = 99


class DecoderType(IntEnum):
    """Available decoder algorithms."""

    GG = 0
    OA = 1
    BD = 2
    CBD = 3
    PP = 4


class SchedType(IntEnum):
    """Scheduling algorithms used when recoding from a buffer."""

    TRIV = 0
    RAND = 1
    RAND_SYS = 2
    MLPI = 3
    MLPI_SYS = 4
    NURAND = 5


def align(a: int, b: int) -> int:
    """Return the number of blocks of size ``b`` needed to hold ``a`` units."""
    if b <= 0:
        raise ValueError("block size must be positive")
    return -(-a // b)


def residual(a: int, b: int) -> int:
    """Return how many units of padding ``a`` needs to fill whole blocks of ``b``."""
    return b * align(a, b) - a


@dataclass
class SncParameters:
    """Parameters describing how data is sparse-network coded."""

    datasize: int
    size_p: int
    size_c: int = 0
    size_b: int = 0
    size_g: int = 0
    type: CodeType = CodeType.BAND
    bpc: bool = False
    gfpower: int = 8
    sys: bool = False
    seed: int = -1

    def __post_init__(self) -> None:
        if self.datasize < 0:
            raise ValueError("datasize must not be negative")
        if self.size_p <= 0:
            raise ValueError("packet size must be positive")
        if self.size_c < 0:
            raise ValueError("number of parity-check packets must not be negative")
        if not 1 <= self.gfpower <= 8:
            raise ValueError("gfpower must be in 1..8")
        self.type = CodeType(self.type)
        self.bpc = bool(self.bpc)
        self.sys = bool(self.sys)

    def source_packets(self) -> int:
        """Number of source packets the data is split into."""
        return align(self.datasize, self.size_p)


@dataclass
class SncPacket:
    """A (possibly coded) packet belonging to a subgeneration or batch."""

    gid: int
    coes: bytearray = field(default_factory=bytearray)
    syms: bytearray = field(default_factory=bytearray)
    ucid: int = -1

    def __post_init__(self) -> None:
        self.coes = bytearray(self.coes)
        self.syms = bytearray(self.syms)

    def is_coded(self) -> bool:
        """True unless the packet carries one uncoded source packet."""
        return self.ucid == -1

    def copy(self) -> SncPacket:
        """Return an independent duplicate of the packet."""
        return SncPacket(self.gid, bytearray(self.coes), bytearray(self.syms), self.ucid)


@dataclass
class Subgeneration:
    """A subset of source packet identifiers coded together."""

    gid: int
    pktid: list[int] = field(default_factory=list)


_CODE_NAMES = {
    "RAND": CodeType.RAND,
    "BAND": CodeType.BAND,
    "WINDWRAP": CodeType.WINDWRAP,
    "BATS": CodeType.BATS,
}

_DECODER_NAMES = {
    "GG": DecoderType.GG,
    "OA": DecoderType.OA,
    "BD": DecoderType.BD,
    "CBD": DecoderType.CBD,
    "PP": DecoderType.PP,
}

_SCHED_NAMES = {
    "TRIV": SchedType.TRIV,
    "RAND": SchedType.RAND,
    "RANDSYS": SchedType.RAND_SYS,
    "MLPI": SchedType.MLPI,
    "MLPISYS": SchedType.MLPI_SYS,
    "NURAND": SchedType.NURAND,
}


def _lookup(table: dict, name: str, what: str):
    try:
        return table[name]
    except KeyError:
        choices = ", ".join(table)
        raise ValueError(f"unknown {what} {name!r}; expected one of {choices}") from None


def parse_code_type(name: str) -> CodeType:
    """Map a command-line code name to a :class:`CodeType`."""
    return _lookup(_CODE_NAMES, name, "code type")


def parse_decoder_type(name: str) -> DecoderType:
    """Map a command-line decoder name to a :class:`DecoderType`."""
    return _lookup(_DECODER_NAMES, name, "decoder type")


def parse_sched_type(name: str) -> SchedType:
    """Map a command-line scheduling name to a :class:`SchedType`."""
    return _lookup(_SCHED_NAMES, name, "scheduling type")