"""Fetch, decode and orchestration pipeline."""
