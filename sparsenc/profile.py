"""Link loss profiles for cooperative D2D simulations.

A profile file is plain text. The first line holds the number of users. The
second line holds the base-station-to-user loss probability of each user.
It is followed by one line per user with that user's loss probabilities to
every user, itself included. Values on a line are separated by whitespace.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class LossProfile:
    """Loss probabilities of the broadcast links and the user-to-user links."""

    nusers: int
    b2u: tuple[float, ...]
    u2u_loss: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        if self.nusers < 0:
            raise ValueError("number of users must not be negative")
        object.__setattr__(self, "b2u", tuple(float(p) for p in self.b2u))
        object.__setattr__(
            self, "u2u_loss", tuple(tuple(float(p) for p in row) for row in self.u2u_loss)
        )
        if len(self.b2u) != self.nusers:
            raise ValueError(f"expected {self.nusers} broadcast loss values, got {len(self.b2u)}")
        if len(self.u2u_loss) != self.nusers or any(
            len(row) != self.nusers for row in self.u2u_loss
        ):
            raise ValueError(f"user-to-user losses must form a {self.nusers}x{self.nusers} matrix")

    def u2u(self, sender: int, receiver: int) -> float:
        """Loss probability of the link from ``sender`` to ``receiver``."""
        if not 0 <= sender < self.nusers or not 0 <= receiver < self.nusers:
            raise IndexError("user index out of range")
        return self.u2u_loss[sender][receiver]


def _parse_row(line: str, count: int, lineno: int) -> tuple[float, ...]:
    tokens = line.split()
    if len(tokens) < count:
        raise ValueError(f"line {lineno}: expected {count} values, got {len(tokens)}")
    try:
        return tuple(float(tok) for tok in tokens[:count])
    except ValueError as exc:
        raise ValueError(f"line {lineno}: {exc}") from None


def parse_loss_profile(text: str) -> LossProfile:
    """Parse the text of a loss profile."""
    lines = text.splitlines()
    if not lines or not lines[0].split():
        raise ValueError("missing number of users")
    first = lines[0].split()[0]
    try:
        nusers = int(first)
    except ValueError:
        raise ValueError(f"line 1: invalid number of users {first!r}") from None
    if nusers < 0:
        raise ValueError("number of users must not be negative")
    if len(lines) < 2 + nusers and nusers > 0:
        raise ValueError(f"expected {2 + nusers} lines, got {len(lines)}")

    b2u = _parse_row(lines[1], nusers, 2) if nusers else ()
    u2u = tuple(_parse_row(lines[2 + i], nusers, 3 + i) for i in range(nusers))
    return LossProfile(nusers, b2u, u2u)


def load_loss_profile(path: str | os.PathLike[str]) -> LossProfile:
    """Read and parse a loss profile file."""
    with open(path, encoding="utf-8") as handle:
        return parse_loss_profile(handle.read())