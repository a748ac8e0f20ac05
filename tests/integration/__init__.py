"""Integration tests for the albums API client."""
