"""Pygame rendering for the ecosystem simulator."""
