"""Random source construction for reproducible graph generation.

Generators draw from a numpy Generator (PCG64). A fixed seed makes vertex
and edge streams fully reproducible; no seed draws fresh OS entropy.
"""

import numpy as np


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create the random source used by graph generators.

    Args:
        seed: Seed value (e.g., 42), or None for an unpredictable seed.

    Returns:
        A numpy random Generator.
    """
    return np.random.default_rng(seed)


def verify_seed_determinism(seed: int) -> bool:
    """Verify that two sources created from the same seed agree.

    Draws 10 floats and 10 bounded integers from each of two fresh
    sources seeded with seed. This is the self-test that proves seed
    control works for both kinds of draws the generators use.

    Args:
        seed: Seed value to test.

    Returns:
        True if both sources produce identical sequences.
    """
    a = make_rng(seed)
    b = make_rng(seed)

    f1 = [a.random() for _ in range(10)]
    i1 = [int(a.integers(0, 1000)) for _ in range(10)]
    f2 = [b.random() for _ in range(10)]
    i2 = [int(b.integers(0, 1000)) for _ in range(10)]

    return f1 == f2 and i1 == i2
