"""
Speed curve: the tick delay shrinks by one millisecond per point scored.
"""

from .constants import MAX_DELAY_MS, MIN_DELAY_MS


def tick_delay_ms(score: int, min_delay: int = MIN_DELAY_MS, max_delay: int = MAX_DELAY_MS) -> int:
    """Delay before the next tick, never below `min_delay`."""
    return max(min_delay, max_delay - score)
