"""Eviction policies and their ordering structures."""
