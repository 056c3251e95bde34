"""Health API 패키지."""
