"""Configuration and domain models."""
