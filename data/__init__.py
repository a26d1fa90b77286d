"""Pairing ingestion, filtering and sample data."""
