"""Configuration models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FetchConfig(BaseModel):
    """Feed fetching configuration."""

    timeout: float = Field(15.0, description="Per-feed request timeout in seconds", gt=0)
    max_concurrent: int = Field(1, description="Feeds fetched at once (1 = sequential)", ge=1, le=20)
    max_items_per_feed: int = Field(30, description="Max items parsed from a single feed", ge=1, le=500)
    user_agent: str = Field("dailyreads/1.0 (+RSS aggregator)", description="User-Agent header")


class SelectionConfig(BaseModel):
    """Selection configuration."""

    max_articles: int = Field(9, description="Number of articles returned", ge=1, le=100)
    diversity_threshold: int = Field(
        5,
        description="Picks after which a source may repeat in the first pass",
        ge=0,
    )


class ReaderConfig(BaseModel):
    """Article reader configuration."""

    backend: str = Field("proxy", description="Reader backend (proxy, local)")
    proxy_base_url: str = Field("https://r.jina.ai/", description="Clean reader proxy base URL")
    timeout: float = Field(30.0, description="Reader request timeout in seconds", gt=0)
    user_agent: str = Field("Mozilla/5.0", description="User-Agent header for article requests")

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        """Validate the reader backend name."""
        v = v.lower()
        if v not in ("proxy", "local"):
            raise ValueError(f"Unknown reader backend: {v}")
        return v


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = Field("127.0.0.1", description="Bind host")
    port: int = Field(8000, description="Bind port", ge=1, le=65535)
    cache_max_age: int = Field(3600, description="Cache-Control max-age for the daily list", ge=0)
    allow_origin: str = Field("*", description="Access-Control-Allow-Origin value")


class ConfigModel(BaseModel):
    """Main configuration model."""

    log_level: str = Field("INFO", description="Logging level")
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    selection: SelectionConfig = Field(default_factory=SelectionConfig)
    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


class SourceConfig(BaseModel):
    """Feed source from sources.yaml."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Source name")
    url: str = Field(..., description="RSS feed URL")
    enabled: bool = Field(True, description="Whether source is enabled")


DEFAULT_SOURCES = (
    SourceConfig(name="Aeon", url="https://aeon.co/feed.rss"),
    SourceConfig(name="The Paris Review", url="https://www.theparisreview.org/blog/feed/"),
    SourceConfig(name="Nautilus", url="https://nautil.us/feed/"),
    SourceConfig(
        name="Literary Hub - Craft and Advice",
        url="https://lithub.com/category/craftandcriticism/craft-and-advice/feed/",
    ),
    SourceConfig(name="London Review of Books", url="https://www.lrb.co.uk/feeds/lrb"),
)
