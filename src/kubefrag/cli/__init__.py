"""Command-line interface for kubefrag."""
