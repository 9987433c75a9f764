"""Core ring buffer domain: the container, its port and models."""
