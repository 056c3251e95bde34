"""Chat API 패키지."""
