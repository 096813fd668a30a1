"""Command line interface for Replicate Ninja."""
