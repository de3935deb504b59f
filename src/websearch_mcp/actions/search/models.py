from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, field_validator

class SearchResult(BaseModel):
    title: str = ""
    url: str = ""
    description: str = ""

    @field_validator("title", "url", "description", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

class SearchToolArgs(BaseModel):
    query: str

class SearchFailureKind(str, Enum):
    CONFIGURATION = "configuration"
    UPSTREAM = "upstream"
    # transport failures and unparseable provider bodies
    NETWORK = "network"

class SearchSuccess(BaseModel):
    results: list[SearchResult] = []

class SearchFailure(BaseModel):
    kind: SearchFailureKind
    message: str
    status_code: Optional[int] = None
    body: Optional[str] = None

SearchOutcome = Union[SearchSuccess, SearchFailure]
