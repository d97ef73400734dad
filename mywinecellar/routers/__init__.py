"""API routers for MyWineCellar."""

from mywinecellar.routers import producers, wines

__all__ = ["producers", "wines"]
