"""Command line interface (typer)"""
