"""Core orchestration: errors, configuration, paths and the package provider."""
