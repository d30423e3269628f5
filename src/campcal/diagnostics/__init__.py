"""Diagnostics package.

Light-weight scripts runnable through ``campcal diag <tool>``:
pretty month grids and randomized arithmetic property checks.
"""

__all__ = ["pretty_month", "round_trip"]
