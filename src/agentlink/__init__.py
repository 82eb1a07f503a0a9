"""AgentLink provisioning client.

Manages Frontegg AgentLink applications, MCP configuration, sources,
imported tools and policies through the Frontegg REST API.
"""

__version__ = "0.1.0"
