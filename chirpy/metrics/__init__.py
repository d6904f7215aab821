"""
Request metrics — the file server hit counter.
"""

from chirpy.metrics.hit_counter import HitCounter

__all__ = ["HitCounter"]
