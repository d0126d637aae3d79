"""Inventory service: CRUD over inventory items keyed by article number."""

__version__ = "1.0.0"
