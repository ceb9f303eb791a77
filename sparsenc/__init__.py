"""Sparse network coding building blocks: parameters, bit packing, LDPC graphs, channels and loss profiles."""

__version__ = "0.1.0"
__all__ = ["params", "bits", "bipartite", "channel", "profile"]