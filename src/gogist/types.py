"""
Shared types for the gist client.
"""

from dataclasses import dataclass, field
from typing import Optional

from .config import APP_NAME, APP_VERSION

DEFAULT_HEADERS = {
    "Accept": "application/vnd.github.v3+json",
    "User-Agent": f"{APP_NAME}/{APP_VERSION}",
}


@dataclass(frozen=True)
class GistFile:
    filename: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"content": self.content}


@dataclass(frozen=True)
class Gist:
    description: str = ""
    public: bool = False
    files: dict[str, GistFile] = field(default_factory=dict)

    def to_payload(self) -> dict:
        return {
            "description": self.description,
            "public": self.public,
            "files": {name: f.to_dict() for name, f in self.files.items()},
        }


@dataclass(frozen=True)
class GistSummary:
    html_url: str
    id: Optional[str] = None
    description: Optional[str] = None
    public: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: dict) -> "GistSummary":
        return cls(
            html_url=data.get("html_url", ""),
            id=data.get("id"),
            description=data.get("description"),
            public=data.get("public"),
        )
