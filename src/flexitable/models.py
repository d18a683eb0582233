"""Input model: document metadata and extracted page tags."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional


def _pick(data: Dict[str, Any], *keys: str, default=None):
    """Return the first key present in data (camelCase or snake_case)."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass
class Tag:
    """One extracted tag on a page."""
    groups: Optional[str] = None
    type: Optional[str] = None
    page: int = 0
    status: Optional[str] = None
    comment: Optional[str] = None
    comment_info: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tag":
        if not isinstance(data, dict):
            raise ValueError(f"Tag must be an object, got {type(data).__name__}")
        page = _pick(data, "page", default=0)
        try:
            page = int(page) if page is not None else 0
        except (TypeError, ValueError):
            raise ValueError(f"Tag page must be a number, got {page!r}") from None
        return cls(
            groups=_optional_str(_pick(data, "groups", "group")),
            type=_optional_str(_pick(data, "type")),
            page=page,
            status=_optional_str(_pick(data, "status")),
            comment=_optional_str(_pick(data, "comment")),
            comment_info=_optional_str(_pick(data, "commentInfo", "comment_info")),
        )


@dataclass
class PageTags:
    """Tags extracted from one page."""
    tags: List[Tag] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PageTags":
        if not isinstance(data, dict):
            raise ValueError(f"Page tags must be an object, got {type(data).__name__}")
        return cls(tags=[Tag.from_dict(t) for t in (data.get("tags") or [])])


@dataclass
class Document:
    """Document information plus its page tags, as read from input JSON."""
    document_info: Dict[str, str] = field(default_factory=dict)
    page_tags: List[PageTags] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Document":
        """Build from the decoded JSON. Unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ValueError(f"Document must be an object, got {type(data).__name__}")

        info = _pick(data, "documentInfo", "document_info", default=None) or {}
        if not isinstance(info, dict):
            raise ValueError("documentInfo must be an object")

        page_tags = _pick(data, "pageTags", "page_tags", default=None) or []
        if not isinstance(page_tags, list):
            raise ValueError("pageTags must be a list")

        return cls(
            document_info={str(k): "" if v is None else str(v) for k, v in info.items()},
            page_tags=[PageTags.from_dict(pt) for pt in page_tags],
        )

    def iter_tags(self) -> Iterator[Tag]:
        """All tags of all pages, in input order."""
        for page_tags in self.page_tags:
            yield from page_tags.tags

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the same JSON shape from_dict reads."""
        return {
            "documentInfo": dict(self.document_info),
            "pageTags": [
                {"tags": [{
                    "groups": t.groups,
                    "type": t.type,
                    "page": t.page,
                    "status": t.status,
                    "comment": t.comment,
                    "commentInfo": t.comment_info,
                } for t in pt.tags]}
                for pt in self.page_tags
            ],
        }


def load_document(path: Path) -> Document:
    """Read a Document from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return Document.from_dict(data)


def save_document(document: Document, path: Path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document.to_dict(), f, indent=2)
