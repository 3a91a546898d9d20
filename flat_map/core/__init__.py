"""Core - configuration and exceptions."""
