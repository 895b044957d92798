"""Command-line interface for yCard."""
