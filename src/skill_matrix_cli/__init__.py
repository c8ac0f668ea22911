"""Command-line interface for skill-matrix-extractor."""
