"""Adapters connecting ring buffers to other systems."""
