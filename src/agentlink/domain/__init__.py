"""Domain layer: enumerations and wire models for the AgentLink API."""
