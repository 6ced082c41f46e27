"""CLI command implementations for grade-eval."""
