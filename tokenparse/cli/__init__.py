"""Command implementations for the tokenparse CLI."""
