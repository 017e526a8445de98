"""A small pygame arcade game with a stack of menu, play and pause states."""

__version__ = "0.1.1"