"""Map, character and session objects of the tile map runtime."""
