"""Core package: domain, data mapping, infrastructure, settings."""
