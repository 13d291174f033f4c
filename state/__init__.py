"""Process-wide runtime state."""
