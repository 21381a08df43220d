"""Asynchronous client for Supabase REST tables and public storage downloads."""

__version__ = "0.4.15"
__all__ = ["builder", "client", "headers", "query", "response", "storage", "writes"]