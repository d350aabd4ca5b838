"""Application layer - document validation, readiness, and schedule editing."""
