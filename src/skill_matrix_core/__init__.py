"""Core domain for skill-matrix-extractor: schema, validation, configuration."""

__version__ = "0.1.0"
