"""Packet erasure models for simulated lossy links."""

from __future__ import annotations

import random
from collections.abc import Sequence
from enum import IntEnum
from typing import TypeVar

T = TypeVar("T")


def _check_probability(name: str, value: float) -> float:
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be a probability in [0, 1], got {value}")
    return value


class ChannelState(IntEnum):
    """State of a two-state Gilbert-Elliott channel."""

    GOOD = 0
    BAD = 1


class GilbertElliottChannel:
    """Bursty erasure channel that alternates between a good and a bad state.

    ``pg`` is the chance of moving from the good to the bad state, ``pb`` from
    the bad to the good state; ``ag`` and ``ab`` are the chances that a packet
    gets through in the good and the bad state respectively.
    """

    def __init__(
        self,
        pg: float,
        pb: float,
        ag: float,
        ab: float,
        rng: random.Random | None = None,
        state: ChannelState = ChannelState.GOOD,
    ) -> None:
        self.pg = _check_probability("pg", pg)
        self.pb = _check_probability("pb", pb)
        self.ag = _check_probability("ag", ag)
        self.ab = _check_probability("ab", ab)
        self.rng = rng if rng is not None else random.Random()
        self.state = ChannelState(state)

    def _draw(self) -> int:
        return self.rng.randrange(100)

    def erased(self) -> bool:
        """Advance the channel state and report whether the next packet is lost."""
        if self.state is ChannelState.GOOD:
            if self._draw() < self.pg * 100:
                self.state = ChannelState.BAD
        elif self._draw() < self.pb * 100:
            self.state = ChannelState.GOOD

        success = self.ag if self.state is ChannelState.GOOD else self.ab
        return self._draw() < (1 - success) * 100


class ErasureChannel:
    """Memoryless channel that loses each packet with probability ``pe``.

    Losses are decided on an integer grid of ``resolution`` steps, so ``pe`` is
    effectively rounded up to a multiple of ``1 / resolution``.
    """

    def __init__(
        self,
        pe: float,
        rng: random.Random | None = None,
        resolution: int = 10_000_000,
    ) -> None:
        self.pe = _check_probability("pe", pe)
        if resolution <= 0:
            raise ValueError("resolution must be positive")
        self.resolution = resolution
        self.rng = rng if rng is not None else random.Random()

    def erased(self) -> bool:
        """Report whether the next packet is lost."""
        return self.rng.randrange(self.resolution) < self.pe * self.resolution


def expand_per_hop(values: Sequence[T], nhop: int) -> list[T]:
    """Return one value per hop from either a single shared value or one per hop."""
    if nhop <= 0:
        raise ValueError("number of hops must be positive")
    values = list(values)
    if len(values) == 1:
        return values * nhop
    if len(values) == nhop:
        return values
    raise ValueError(f"expected 1 or {nhop} values, got {len(values)}")