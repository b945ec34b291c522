"""Command-line entry point for training plan generation."""
