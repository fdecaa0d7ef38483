"""Stage 0 — path data to drawing operations."""
