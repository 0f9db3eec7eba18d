"""Core library modules."""
