"""Utility helpers for the trigex.moe site."""
