"""Formatting primitives: numbers, byte sizes, durations, percentages."""
