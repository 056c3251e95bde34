"""Ingest API 패키지."""
