"""CLI Commands"""
from prompt_schema.cli.commands import serve, validate

__all__ = ["serve", "validate"]
