"""Randomized practice combo generator for the Steve vs. Lucina matchup."""

__all__ = [
    "config",
    "scenario",
    "generator",
    "codec",
    "documents",
    "share",
    "session",
    "render",
    "cli",
]
