"""Integration layer: DTOs returned by the application handlers."""
