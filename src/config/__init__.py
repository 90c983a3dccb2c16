"""Validator configuration."""
