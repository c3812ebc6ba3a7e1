"""Command-line interface for carlot."""
