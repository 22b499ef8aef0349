"""Data models for coins-collector."""

import json
from dataclasses import dataclass, field

# Ordered mapping of ContextObject keys to a decoded value, or to a list of
# values once the key has repeated.
FieldValue = str | list[str]
DecodedFields = dict[str, FieldValue]


@dataclass
class MetadataRecord:
    """Referent metadata lifted out of a single ContextObject.

    ``id`` and ``format`` are normally strings. When ``rft_id`` or
    ``rft_val_fmt`` repeats, the decoded field is already a list, and the
    record holds that whole list.
    """

    id: FieldValue | None = None
    format: FieldValue | None = None
    metadata: DecodedFields = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Return the record with absent parts left out."""
        data: dict = {}
        if self.id is not None:
            data["id"] = self.id
        if self.format is not None:
            data["format"] = self.format
        if self.metadata:
            data["metadata"] = dict(self.metadata)
        return data

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def to_text(self) -> str:
        """Plain ``key: value`` lines, one per field."""
        lines = []
        if self.id is not None:
            lines.append(f"id: {_join(self.id)}")
        if self.format is not None:
            lines.append(f"format: {_join(self.format)}")
        for key, value in self.metadata.items():
            lines.append(f"{key}: {_join(value)}")
        return "\n".join(lines)

    @classmethod
    def from_dict(cls, data: str | dict) -> "MetadataRecord":
        """Deserialize from JSON string or dict."""
        if isinstance(data, str):
            data = json.loads(data)
        return cls(
            id=data.get("id"),
            format=data.get("format"),
            metadata=dict(data.get("metadata") or {}),
        )


def _join(value: FieldValue) -> str:
    if isinstance(value, list):
        return "; ".join(value)
    return value
