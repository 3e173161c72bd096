import os

from pydantic import BaseModel, Field


class SearchClientConfig(BaseModel):
    url: str
    access_token: str = ""
    search_path: str = "/search"
    timeout_seconds: float = Field(default=10.0, gt=0)

    class Config:
        frozen = True

    @property
    def search_url(self) -> str:
        path = self.search_path.lstrip("/")
        base = self.url.rstrip("/")
        return f"{base}/{path}" if path else base

    @classmethod
    def from_env(cls) -> "SearchClientConfig":
        url = os.getenv("USER_SEARCH_URL")
        if not url:
            raise RuntimeError("USER_SEARCH_URL must be set")
        return cls(
            url=url,
            access_token=os.getenv("USER_SEARCH_ACCESS_TOKEN", ""),
            search_path=os.getenv("USER_SEARCH_PATH", "/search"),
            timeout_seconds=float(os.getenv("USER_SEARCH_TIMEOUT", "10.0")),
        )
