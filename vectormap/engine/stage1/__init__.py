"""Stage 1 — per-region and document bounds."""
