# schemas/news_schemas.py

from typing import Optional, Dict, Any, List
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Placeholder the provider puts in title/description of taken-down articles
REMOVED_MARKER = "[Removed]"


class FeedMode(str, Enum):
    ALL_NEWS = "all-news"
    TOP_HEADLINES = "top-headlines"
    COUNTRY_NEWS = "country"


class NewsCategory(str, Enum):
    BUSINESS = "business"
    ENTERTAINMENT = "entertainment"
    GENERAL = "general"
    HEALTH = "health"
    SCIENCE = "science"
    SPORTS = "sports"
    TECHNOLOGY = "technology"


class Article(BaseModel):
    """
    A single news item.

    Serialized with camelCase names. Also accepts the raw provider shape
    (`urlToImage`, nested `source.name`).
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field("", description="Article title, may be empty")
    description: Optional[str] = Field(None, description="Article summary")
    image_url: Optional[str] = Field(None, alias="imageUrl", description="Image URL")
    published_at: Optional[str] = Field(
        None, alias="publishedAt", description="Publication timestamp"
    )
    url: str = Field(..., description="Canonical article link")
    author: Optional[str] = Field(None, description="Article author")
    source_name: str = Field(
        "", alias="sourceName", description="Provider-assigned source label"
    )

    @model_validator(mode="before")
    @classmethod
    def accept_provider_shape(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "imageUrl" not in data and "urlToImage" in data:
            data["imageUrl"] = data["urlToImage"]
        source = data.get("source")
        if "sourceName" not in data and isinstance(source, dict):
            data["sourceName"] = source.get("name")
        return data

    @field_validator("title", "source_name", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    def is_redacted(self) -> bool:
        """True if the provider replaced the content with the removal marker."""
        return REMOVED_MARKER in self.title or REMOVED_MARKER in (
            self.description or ""
        )


class FeedPage(BaseModel):
    """One page of articles plus the upstream total count."""

    model_config = ConfigDict(populate_by_name=True)

    total_results: int = Field(0, ge=0, alias="totalResults")
    articles: List[Article] = Field(default_factory=list)


class GatewayEnvelope(BaseModel):
    """Uniform response of every gateway feed route."""

    success: bool
    data: Optional[FeedPage] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, page: FeedPage) -> "GatewayEnvelope":
        return cls(success=True, data=page)

    @classmethod
    def fail(cls, message: str) -> "GatewayEnvelope":
        return cls(success=False, message=message)

    def to_content(self) -> Dict[str, Any]:
        """JSON body with camelCase names and without absent top-level keys."""
        content = self.model_dump(by_alias=True)
        return {key: value for key, value in content.items() if value is not None}


class FeedQuery(BaseModel):
    """Client-held pagination and filter state."""

    model_config = ConfigDict(frozen=True)

    mode: FeedMode = FeedMode.ALL_NEWS
    page: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1, le=100)
    selector: str = Field(
        "", description="Query string, category or ISO country code depending on mode"
    )

    @model_validator(mode="before")
    @classmethod
    def normalize_selector(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        selector = (data.get("selector") or "").strip()
        if data.get("mode", FeedMode.ALL_NEWS) != FeedMode.ALL_NEWS:
            selector = selector.lower()
        data["selector"] = selector
        return data

    @model_validator(mode="after")
    def require_selector(self):
        if self.mode != FeedMode.ALL_NEWS and not self.selector:
            raise ValueError(f"{self.mode.value} requires a non-empty selector")
        return self

    @classmethod
    def from_route(
        cls, path: str, page_size: int = 10, query: str = ""
    ) -> "FeedQuery":
        """
        Build the initial query of a view from its route.

        `/` is all news (with the optional free-text `query`),
        `/top-headlines/<category>` and `/country/<iso>` are scoped feeds.
        """
        parts = [part for part in path.split("?")[0].split("/") if part]
        if not parts:
            return cls(mode=FeedMode.ALL_NEWS, page_size=page_size, selector=query)
        if len(parts) == 2 and parts[0] == FeedMode.TOP_HEADLINES.value:
            return cls(mode=FeedMode.TOP_HEADLINES, page_size=page_size, selector=parts[1])
        if len(parts) == 2 and parts[0] == FeedMode.COUNTRY_NEWS.value:
            return cls(mode=FeedMode.COUNTRY_NEWS, page_size=page_size, selector=parts[1])
        raise ValueError(f"Unknown route: {path}")

    def with_page(self, page: int) -> "FeedQuery":
        return FeedQuery(
            mode=self.mode, page=page, page_size=self.page_size, selector=self.selector
        )

    def with_selector(self, selector: str) -> "FeedQuery":
        """Same mode with a new selector, back on the first page."""
        return FeedQuery(
            mode=self.mode, page=1, page_size=self.page_size, selector=selector
        )

    def gateway_path(self) -> str:
        if self.mode == FeedMode.COUNTRY_NEWS:
            return f"/country/{self.selector}"
        return f"/{self.mode.value}"

    def gateway_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {"page": self.page, "pageSize": self.page_size}
        if self.mode == FeedMode.ALL_NEWS:
            params["q"] = self.selector
        elif self.mode == FeedMode.TOP_HEADLINES:
            params["category"] = self.selector
        return params
