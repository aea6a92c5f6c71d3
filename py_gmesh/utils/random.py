"""
Random number generation utilities.

Every pipeline pass gets its own NumPy Generator. Passing a seed makes the
randomized parts of a pass (the uniform pattern and the palette)
reproducible; without one a fresh seed is drawn, matching the
non-deterministic behaviour of an interactive run.
"""

import hashlib
import uuid
from typing import Optional

import numpy as np


def new_seed() -> str:
    """Return a short random seed string."""
    return str(uuid.uuid4())[:8]


def seed_sequence(seed: str) -> np.random.SeedSequence:
    """Derive a SeedSequence from a seed string."""
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return np.random.SeedSequence(int.from_bytes(digest, "little"))


def create_rng(seed: Optional[str] = None) -> np.random.Generator:
    """
    Create a pass-scoped random generator.

    Args:
        seed: Seed string, or None to draw a fresh one

    Returns:
        numpy Generator seeded from the string
    """
    return np.random.default_rng(seed_sequence(seed if seed is not None else new_seed()))
