"""Mock inventory provider for local development."""
