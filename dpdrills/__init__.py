"""Solvers for matching, card buying, gold knapsack, walls, rover loads, job orders and renunciation plans."""

__version__ = "0.1.0"