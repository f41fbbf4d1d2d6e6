"""Application layer - orchestrators and queries."""
