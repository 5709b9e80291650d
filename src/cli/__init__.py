"""CLI de avatar-link (Typer + Rich)."""
