"""Data contracts for resource manifests."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ContentEntry:
    """One item of a manifest's content list."""
    path: str
    name: str
    namespace: str = ""


@dataclass(frozen=True)
class Resource:
    """A single manifest node."""
    name: str
    namespace: str
    relative_path: str
    dependencies: list[str] = field(default_factory=list)
    content: list[ContentEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict, relative_path: str) -> "Resource":
        """Build a Resource from an already validated manifest object."""
        return cls(
            name=data["name"],
            namespace=data["namespace"],
            relative_path=relative_path,
            dependencies=list(data["dependencies"]),
            content=[
                ContentEntry(
                    path=item["path"],
                    name=item["name"],
                    namespace=item.get("namespace", ""),
                )
                for item in data["content"]
            ],
        )
