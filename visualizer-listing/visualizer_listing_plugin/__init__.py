from .plugin import ListingVisualizer

__all__ = ["ListingVisualizer"]
