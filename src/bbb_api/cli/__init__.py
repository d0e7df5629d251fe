"""Command line diagnostics (typer + rich)."""
