"""Test suite for skill-matrix-extractor."""
