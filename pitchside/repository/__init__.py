"""Data-access helpers for the Pitchside service."""
