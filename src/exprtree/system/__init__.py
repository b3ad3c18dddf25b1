"""System-wide models and error types."""
