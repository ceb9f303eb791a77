# sparsenc

Building blocks for simulating sparse network codes over lossy networks.
The package has no dependencies outside the standard library.

## What is in the package

- **`sparsenc.params`**: code parameters and packet structures.
  - Enumerations `CodeType` (`RAND`, `BAND`, `WINDWRAP`, `BATS`, `RAPTOR`),
    `DecoderType` (`GG`, `OA`, `BD`, `CBD`, `PP`) and `SchedType`
    (`TRIV`, `RAND`, `RAND_SYS`, `MLPI`, `MLPI_SYS`, `NURAND`).
  - `parse_code_type`, `parse_decoder_type` and `parse_sched_type` map names
    such as `"BAND"`, `"CBD"`, `"RANDSYS"` or `"MLPISYS"` to these enums and
    raise `ValueError` for unknown names.
  - `SncParameters`, a dataclass holding `datasize`, `size_p`, `size_c`,
    `size_b`, `size_g`, `type`, `bpc`, `gfpower`, `sys` and `seed`. It rejects
    a negative data size or check count, a non-positive packet size and a
    `gfpower` outside 1..8. `source_packets()` gives the number of packets
    the data splits into.
  - `SncPacket` (`gid`, `coes`, `syms`, `ucid`) with `is_coded()` and `copy()`,
    and `Subgeneration` (`gid`, `pktid`).
  - `align(a, b)` (blocks of size `b` needed for `a` units) and
    `residual(a, b)` (padding needed to fill those blocks).
- **`sparsenc.bits`**: bit-level helpers.
  - `pack_bits` / `read_bits` store and fetch `length`-bit elements (1 to 8
    bits, most significant bit first) in a byte array, as used for GF(2^n)
    coefficients with fewer than eight bits. An element that runs past the
    end of the array keeps only its high bits.
  - `get_bit` / `set_bit` access single bits, counting from the low bit of
    each byte.
  - `random_unique_numbers(n, upper, rng)` draws `n` distinct values from
    `range(upper)` by a Fisher–Yates shuffle and returns them sorted.
  - `subgeneration_neighbors(subgenerations, npackets)` lists, for every
    packet, the ids of the subgenerations containing it.
  - `set_loglevel` / `get_loglevel` hold a library log level; only
    `"TRACE"` is recognised.
- **`sparsenc.bipartite`**: LDPC precode graphs.
  - `BipartiteGraph` with `add_edge`, `has_edge` and `edges`.
  - `build_ldpc_graph(nleft, nright, binary, rng, dense)` builds the
    circulant graph in which each source node joins three check nodes. With
    `dense=True`, or with `dense=None` and the environment variable
    `SNC_PRECODE=HDPC`, it builds a random, highly dense reference graph
    instead. Non-binary graphs draw edge coefficients from 1..255.
- **`sparsenc.channel`**: link models.
  - `ErasureChannel(pe, rng, resolution)` loses each packet independently
    with probability `pe`, decided on an integer grid of `resolution` steps.
  - `GilbertElliottChannel(pg, pb, ag, ab, rng, state)` is a two-state burst
    model with states `ChannelState.GOOD` and `ChannelState.BAD`.
  - `expand_per_hop(values, nhop)` turns either one shared value or one value
    per hop into a per-hop list.
- **`sparsenc.profile`**: user loss profiles for cooperative D2D setups.
  `LossProfile` holds `nusers`, the base-station-to-user losses `b2u` and
  the user-to-user matrix, read through `u2u(sender, receiver)`.
  `parse_loss_profile(text)` and `load_loss_profile(path)` read it.

## Installation

```
pip install .
```

## Examples

```python
import random

from sparsenc.bipartite import build_ldpc_graph
from sparsenc.bits import pack_bits, read_bits
from sparsenc.channel import GilbertElliottChannel, expand_per_hop
from sparsenc.params import SncParameters, parse_sched_type

rng = random.Random(1)

params = SncParameters(datasize=3200, size_p=200, size_b=16, size_g=16)
print(params.source_packets())          # 16
print(parse_sched_type("MLPI"))         # SchedType.MLPI

coes = bytearray(2)
pack_bits(coes, 5, 3, 1)
print(read_bits(coes, 3, 1))            # 5

graph = build_ldpc_graph(32, 5, True, rng, False)
print(sorted(graph.edges())[:3])

hops = [GilbertElliottChannel(pg, pb, ag, ab, rng)
        for pg, pb, ag, ab in expand_per_hop([(0.1, 0.3, 1.0, 0.5)], 3)]
received = sum(not hop.erased() for hop in hops)
```

A loss profile file holds the number of users on its first line, the
base-station-to-user loss probabilities on the second, and then one row of
user-to-user loss probabilities per user, separated by whitespace:

```
2
0.1	0.2
0.0	0.3
0.4	0.0
```

```python
from sparsenc.profile import load_loss_profile

profile = load_loss_profile("losses.txt")
print(profile.b2u)         # (0.1, 0.2)
print(profile.u2u(0, 1))   # 0.3
```

## What the package does not do

The package supplies the parameters, packet structures, precode graphs and
channel models that a sparse network coding system is built from, but it
has no encoder, decoder or recoding buffer: it does not generate coded
packets, decode them, recode at intermediate nodes or serialise packets.
It also has no command-line program; simulations are written by the user
from the pieces above.

## Running the tests

```
pip install .[test]
pytest
```