"""Pygame rendering and the autoplay demo."""
