"""Extraction strategies, selection policy and observability for skill-matrix-extractor."""
