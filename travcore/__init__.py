"""Core data structures and text utilities: linked lists, hash tables, stacks, INI reading, hashing and string helpers."""

__version__ = "0.1.0"