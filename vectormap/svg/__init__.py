"""Path-data lexing, outline building, document parsing and SVG output."""
