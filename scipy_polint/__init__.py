"""Polynomial interpolation routines that should be added to scipy one day."""
