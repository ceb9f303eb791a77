import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sparsenc.channel import (
    ChannelState,
    ErasureChannel,
    GilbertElliottChannel,
    expand_per_hop,
)


def test_gilbert_starts_in_good_state_by_default():
    ch = GilbertElliottChannel(0.0, 0.0, 1.0, 0.0, rng=random.Random(0))
    assert ch.state is ChannelState.GOOD
    assert ch.state == 0
    assert ch.erased() is False
    assert ch.state is ChannelState.GOOD


def test_erasure_channel_never_loses_at_zero():
    ch = ErasureChannel(0.0, rng=random.Random(1))
    assert not any(ch.erased() for _ in range(500))


def test_erasure_channel_always_loses_at_one():
    ch = ErasureChannel(1.0, rng=random.Random(1))
    assert all(ch.erased() for _ in range(500))


def test_erasure_channel_rate_is_close_to_probability():
    ch = ErasureChannel(0.3, rng=random.Random(42))
    n = 20000
    losses = sum(ch.erased() for _ in range(n))
    assert abs(losses / n - 0.3) < 0.02


def test_erasure_channel_is_deterministic_for_seed():
    a = ErasureChannel(0.5, rng=random.Random(7), resolution=100)
    b = ErasureChannel(0.5, rng=random.Random(7), resolution=100)
    assert [a.erased() for _ in range(200)] == [b.erased() for _ in range(200)]


@pytest.mark.parametrize("pe", [-0.1, 1.5])
def test_erasure_channel_rejects_bad_probability(pe):
    with pytest.raises(ValueError):
        ErasureChannel(pe)


def test_erasure_channel_rejects_bad_resolution():
    with pytest.raises(ValueError):
        ErasureChannel(0.1, resolution=0)


def test_gilbert_stays_good_and_lossless():
    ch = GilbertElliottChannel(0.0, 1.0, 1.0, 0.0, rng=random.Random(3))
    results = [ch.erased() for _ in range(300)]
    assert not any(results)
    assert ch.state is ChannelState.GOOD


def test_gilbert_enters_bad_state_and_loses_everything():
    ch = GilbertElliottChannel(1.0, 0.0, 1.0, 0.0, rng=random.Random(3))
    results = [ch.erased() for _ in range(300)]
    assert all(results)
    assert ch.state is ChannelState.BAD
    assert ch.state == 1


def test_gilbert_alternates_states_when_transitions_certain():
    ch = GilbertElliottChannel(1.0, 1.0, 1.0, 0.0, rng=random.Random(5))
    observed = []
    for _ in range(10):
        lost = ch.erased()
        observed.append((ch.state, lost))
    expected = [
        (ChannelState.BAD, True) if k % 2 == 0 else (ChannelState.GOOD, False)
        for k in range(10)
    ]
    assert observed == expected


def test_gilbert_starting_state_respected():
    ch = GilbertElliottChannel(0.0, 0.0, 1.0, 0.0, rng=random.Random(0), state=ChannelState.BAD)
    assert ch.erased() is True
    assert ch.state is ChannelState.BAD


def test_gilbert_is_deterministic_for_seed():
    a = GilbertElliottChannel(0.2, 0.4, 0.9, 0.3, rng=random.Random(11))
    b = GilbertElliottChannel(0.2, 0.4, 0.9, 0.3, rng=random.Random(11))
    assert [a.erased() for _ in range(300)] == [b.erased() for _ in range(300)]


@pytest.mark.parametrize(
    "args", [(-0.1, 0.5, 0.5, 0.5), (0.5, 2.0, 0.5, 0.5), (0.5, 0.5, 1.1, 0.5), (0.5, 0.5, 0.5, -1.0)]
)
def test_gilbert_rejects_bad_probabilities(args):
    with pytest.raises(ValueError):
        GilbertElliottChannel(*args)


def test_expand_single_value_to_all_hops():
    assert expand_per_hop([0.25], 4) == [0.25, 0.25, 0.25, 0.25]


def test_expand_keeps_per_hop_values():
    assert expand_per_hop([1, 2, 3], 3) == [1, 2, 3]


def test_expand_rejects_wrong_count():
    with pytest.raises(ValueError):
        expand_per_hop([1, 2], 3)


def test_expand_rejects_nonpositive_hops():
    with pytest.raises(ValueError):
        expand_per_hop([1], 0)


@given(st.integers(min_value=1, max_value=50), st.floats(min_value=0, max_value=1))
def test_expand_length_matches_hops(nhop, value):
    out = expand_per_hop([value], nhop)
    assert len(out) == nhop
    assert set(out) == {value}