"""Output schemas for locheck commands."""
