"""Particle life: kind-driven attraction and repulsion on a wrapping 2D world."""

__version__ = "0.1.0"