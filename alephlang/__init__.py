"""Evaluator for Aleph, a small language of atoms, integers, booleans, lists and sets."""

__version__ = "0.1.0"