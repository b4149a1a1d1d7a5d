"""Ports: interfaces the application layer depends on."""
