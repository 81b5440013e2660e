"""Internal helpers for userpatterns."""
