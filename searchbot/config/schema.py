"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WebSearchConfig(Base):
    """Browser-driven web search configuration."""

    enabled: bool = True
    engine_url: str = "https://www.bing.com/search"
    result_selector: str = "li.b_algo"
    title_selector: str = "h2 a"
    snippet_selector: str = ".b_caption p"
    max_results: int = Field(default=5, ge=1)
    sliding_window_size: int = Field(default=100, ge=1)
    output_dir: str = "./web-search-results"
    results_timeout_ms: int = Field(default=30000, ge=1000, le=120000)
    detail_timeout_ms: int = Field(default=10000, ge=1000, le=120000)
    max_phrase_words: int | None = Field(default=20000, ge=1)  # None disables the cap


class BrowserToolConfig(Base):
    """Headless browser configuration."""

    default_browser: str = "chromium"  # chromium | firefox
    headless: bool = True
    launch_args: list[str] = Field(default_factory=lambda: ["--no-sandbox", "--disable-gpu"])
    auto_install_browsers: bool = True
    blocked_resource_types: list[str] = Field(
        default_factory=lambda: ["image", "stylesheet", "font"]
    )
    allow_private_network: bool = True
    block_file_scheme: bool = True


class WebToolsConfig(Base):
    """Web tools configuration."""

    search: WebSearchConfig = Field(default_factory=WebSearchConfig)
    browser: BrowserToolConfig = Field(default_factory=BrowserToolConfig)


class ToolsConfig(Base):
    """Tools configuration."""

    web: WebToolsConfig = Field(default_factory=WebToolsConfig)


class Config(Base):
    """Root configuration for searchbot."""

    tools: ToolsConfig = Field(default_factory=ToolsConfig)
