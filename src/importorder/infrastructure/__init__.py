"""Infrastructure layer: adapters over Python's ast module."""
