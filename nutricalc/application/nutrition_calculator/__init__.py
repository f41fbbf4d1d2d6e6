"""Nutrition calculator use cases."""
