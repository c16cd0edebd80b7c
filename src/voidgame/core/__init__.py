"""Core utilities shared by every layer."""
