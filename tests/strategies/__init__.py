"""Hypothesis strategies shared across the ftlchain test suite."""
