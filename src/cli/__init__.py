"""Capa CLI (Typer + Rich): comandos y presentación."""

__version__ = "1.0.0"
