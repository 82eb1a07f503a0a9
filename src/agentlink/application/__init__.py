"""Application layer: settings, services and the resource command / query handlers."""
