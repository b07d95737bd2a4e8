"""Ramadan calendar services."""
