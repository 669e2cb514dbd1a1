"""Application layer: filter stages, chain building and reporting."""
