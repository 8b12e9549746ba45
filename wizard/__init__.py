"""Rules engine for the Wizard trick-taking card game."""

__version__ = "0.1.0"
