"""HTTP API (FastAPI)"""
from prompt_schema.api.app import create_app

__all__ = ["create_app"]
