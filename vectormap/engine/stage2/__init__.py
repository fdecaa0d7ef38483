"""Stage 2 — shared fit-to-canvas transform."""
