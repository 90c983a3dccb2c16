"""Data models for rubric, reports and structural checks."""
