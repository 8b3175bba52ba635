"""Utility helpers for multiradix."""
