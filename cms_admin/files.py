"""In-memory file handles for media fields (cover images, logos, popup media).

A media field holds either a persisted backend-relative path (``str``),
meaning "keep the existing file", or a ``FileUpload`` that has not been
sent yet. Only ``FileUpload`` values are ever uploaded.
"""

from dataclasses import dataclass

MB = 1024 * 1024


@dataclass(frozen=True)
class FileUpload:
    """A file picked by the user but not yet uploaded."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.content)

    def as_httpx_file(self) -> tuple[str, bytes, str]:
        return (self.filename, self.content, self.content_type)

    def __repr__(self) -> str:
        return f"FileUpload({self.filename!r}, {self.content_type}, {self.size} bytes)"
