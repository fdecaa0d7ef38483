"""Value types and export models."""
