"""Headless core of a top-down shooter: vectors, colours, gradients, shapes, colliders, entities, scenes and the frame loop."""

__version__ = "0.1.0"