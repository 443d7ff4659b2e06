"""Core: domain, configuration and services. No CLI or subprocess details."""
