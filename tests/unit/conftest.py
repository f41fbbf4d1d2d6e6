"""Unit test configuration.

Unit tests should not depend on nutricalc.app or HTTP transport.
"""
