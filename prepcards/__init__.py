"""Flashcard scheduling and adaptive study-session selection."""
