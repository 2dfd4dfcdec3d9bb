"""Models for Pingdom checks and integrations, and GraphQL services for SolarWinds users."""

__version__ = "0.1.0"