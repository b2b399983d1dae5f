"""Utility helpers: exceptions, error handling, logging and paths."""
