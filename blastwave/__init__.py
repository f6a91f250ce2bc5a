"""Steady oblique-shock flow solver with Lax-Friedrichs split fluxes and compact WENO differencing."""

__version__ = "0.1.0"
__all__ = ["conditions", "derivatives", "flux", "nov5", "solver"]