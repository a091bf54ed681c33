"""Shared infrastructure used across labelforge."""
