"""
In-process metrics for Chirpy.
"""

from .hit_counter import HitCounter, HitCountingApp, hit_counter

__all__ = [
    "HitCounter",
    "HitCountingApp",
    "hit_counter",
]
