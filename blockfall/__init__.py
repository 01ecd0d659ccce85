"""Pieces, shapes, a pausable clock, renderable collections and high scores for a falling-block puzzle game."""

__version__ = "0.1.0"