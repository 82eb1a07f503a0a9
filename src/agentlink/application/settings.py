"""Application settings configuration."""

from neuroglia.hosting.abstractions import ApplicationSettings
from pydantic import BaseModel

from agentlink.domain.enums import DEFAULT_REGION, Region
from agentlink.domain.models import DEFAULT_SOURCE_API_TIMEOUT_MS


class ProviderConfigurationError(Exception):
    """Invalid or incomplete provider configuration.

    Attributes:
        summary: Short title of the problem (e.g. "Missing Client ID")
        detail: Explanation of how to fix it
    """

    def __init__(self, summary: str, detail: str):
        super().__init__(f"{summary}: {detail}")
        self.summary = summary
        self.detail = detail


class SourceSettings(BaseModel):
    """Source the provider makes sure exists in its application at startup."""

    name: str
    type: str
    source_url: str
    api_timeout: int = DEFAULT_SOURCE_API_TIMEOUT_MS
    schema_file: str | None = None  # OpenAPI or GraphQL file imported after the source is resolved


class Settings(ApplicationSettings):
    """Provider settings, read from ``FRONTEGG_*`` environment variables and ``.env``.

    Values passed explicitly to the constructor take precedence over the environment.
    """

    # Frontegg Connection
    region: str = ""  # stg, eu, us, au, ca, uk (defaults to eu)
    base_url: str = ""  # Overrides region when set
    client_id: str = ""
    secret: str = ""
    http_timeout: float = 30.0

    # Provider Application
    application_name: str = ""  # Found or created at startup when set
    sources: list[SourceSettings] = []

    # Logging Configuration
    log_level: str = "INFO"
    log_file_enabled: bool = False
    log_filename: str = "logs/agentlink.log"

    class Config:
        env_file = ".env"
        env_prefix = "FRONTEGG_"
        case_sensitive = False
        extra = "ignore"  # Ignore extra environment variables

    def resolve_base_url(self) -> str:
        """Return the API host: ``base_url`` when set, else the region's host.

        Raises:
            ProviderConfigurationError: If the region is unknown
        """
        if self.base_url:
            return self.base_url.rstrip("/")

        region_name = self.region or DEFAULT_REGION.value
        try:
            region = Region(region_name)
        except ValueError:
            raise ProviderConfigurationError(
                "Invalid Frontegg Region",
                f"The region '{region_name}' is not valid. Valid regions are: {', '.join(Region.names())}",
            ) from None
        return region.base_url

    def validate_credentials(self) -> None:
        """Raises ProviderConfigurationError when the client id or secret is missing."""
        if not self.client_id:
            raise ProviderConfigurationError(
                "Missing Client ID",
                "The provider cannot create the Frontegg API client as there is a missing or empty value for the client_id. "
                "Set the client_id value in the configuration or use the FRONTEGG_CLIENT_ID environment variable.",
            )
        if not self.secret:
            raise ProviderConfigurationError(
                "Missing Secret",
                "The provider cannot create the Frontegg API client as there is a missing or empty value for the secret. "
                "Set the secret value in the configuration or use the FRONTEGG_SECRET environment variable.",
            )


app_settings = Settings()
