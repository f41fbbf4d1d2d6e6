"""Nutrition calculator core: value objects, exceptions and ports."""
