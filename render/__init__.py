"""Pygame drawing helpers."""
