"""Pitchside: field booking and team management for amateur football."""
