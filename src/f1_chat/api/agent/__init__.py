"""Agent API 패키지."""
