"""Readers for JSON data files."""
