"""Reproducibility infrastructure: seeded random sources."""

from randgraph.reproducibility.seed import make_rng, verify_seed_determinism

__all__ = [
    "make_rng",
    "verify_seed_determinism",
]
