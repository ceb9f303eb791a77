"""Bit-level helpers, random subset selection and subgeneration bookkeeping."""

from __future__ import annotations

import random
from collections.abc import Iterable, MutableSequence, Sequence

from .params import Subgeneration

TRACE = 5

_loglevel = 0


def set_loglevel(level: str) -> None:
    """Raise the library log level; only ``"TRACE"`` is recognised."""
    global _loglevel
    if level == "TRACE":
        _loglevel = TRACE


def get_loglevel() -> int:
    """Return the current library log level."""
    return _loglevel


def _check_field(coes: Sequence[int], length: int, index: int) -> tuple[int, int]:
    if not 1 <= length <= 8:
        raise ValueError("bit length must be in 1..8")
    if index < 0:
        raise IndexError("element index must not be negative")
    start = length * index
    if start >= 8 * len(coes):
        raise IndexError("element lies outside the byte array")
    return start % 8, start // 8


def pack_bits(coes: MutableSequence[int], co: int, length: int, index: int) -> None:
    """Store ``co`` as the ``index``-th ``length``-bit element of ``coes``.

    Elements are packed most significant bit first. An element that runs past
    the end of the array keeps only its high bits.
    """
    h, n = _check_field(coes, length, index)
    if not 0 <= co < (1 << length):
        raise ValueError(f"value {co} does not fit in {length} bits")
    if h + length <= 8:
        shift = 8 - (h + length)
        mask = ((1 << length) - 1) << shift
        coes[n] = (coes[n] & ~mask & 0xFF) | (co << shift)
        return
    lo = (h + length) % 8
    high_bits = length - lo
    coes[n] = (coes[n] & ~((1 << high_bits) - 1) & 0xFF) | (co >> lo)
    if n + 1 < len(coes):
        coes[n + 1] = (coes[n + 1] & (0xFF >> lo)) | ((co << (8 - lo)) & 0xFF)


def read_bits(coes: Sequence[int], length: int, index: int) -> int:
    """Return the ``index``-th ``length``-bit element packed in ``coes``.

    If the element runs past the end of the array, the missing low bits read as zero.
    """
    h, n = _check_field(coes, length, index)
    if h + length <= 8:
        shift = 8 - (h + length)
        return (coes[n] >> shift) & ((1 << length) - 1)
    lo = (h + length) % 8
    high = coes[n] & (0xFF >> (8 - (length - lo)))
    low = coes[n + 1] >> (8 - lo) if n + 1 < len(coes) else 0
    return (high << lo) | low


def get_bit(coes: Sequence[int], index: int) -> int:
    """Return bit ``index`` of ``coes``, counting from the low bit of each byte."""
    if index < 0:
        raise IndexError("bit index must not be negative")
    return (coes[index // 8] >> (index % 8)) & 1


def set_bit(coes: MutableSequence[int], index: int) -> None:
    """Set bit ``index`` of ``coes``, counting from the low bit of each byte."""
    if index < 0:
        raise IndexError("bit index must not be negative")
    coes[index // 8] |= 1 << (index % 8)


def random_unique_numbers(n: int, upper: int, rng: random.Random | None = None) -> list[int]:
    """Draw ``n`` distinct integers from ``range(upper)``, returned in ascending order."""
    if upper < 0 or not 0 <= n <= upper:
        raise ValueError("need 0 <= n <= upper")
    rng = rng if rng is not None else random.Random()
    pool = list(range(upper))
    for i in reversed(range(1, upper)):
        j = rng.getrandbits(32) % (i + 1)
        pool[i], pool[j] = pool[j], pool[i]
    return sorted(pool[:n])


def subgeneration_neighbors(
    subgenerations: Iterable[Subgeneration], npackets: int
) -> list[list[int]]:
    """For every packet, list the ids of the subgenerations containing it, in order."""
    neighbors: list[list[int]] = [[] for _ in range(npackets)]
    for gene in subgenerations:
        for pktid in gene.pktid:
            if not 0 <= pktid < npackets:
                raise IndexError(f"packet id {pktid} out of range")
            if gene.gid not in neighbors[pktid]:
                neighbors[pktid].append(gene.gid)
    return neighbors