"""
Core Time Model

Defines WHAT a viewing window is, independent of any conductor, mode or UI.

Invariants:
- Bounds and Deltas are immutable values; every change produces a new one.
- Deltas are applied around a pivot time, never around an already-widened bound.
- Window math is pure: no conductor access, no logging, no IO.

Core explicitly does NOT:
- Decide which mode or time system is active
- Own subscriptions to tick sources
- Render or persist anything

Time advancement is always external (tick sources).
"""
