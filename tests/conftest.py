"""Shared test configuration.

Unit tests under tests/unit/ only touch the domain and application layers.
Integration tests under tests/integration/ load the FastAPI app.
"""
