import asyncio
import base64
import mimetypes
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class AttachmentType(str, Enum):
    IMAGE = "image"
    DOCUMENT = "document"


class Attachment(BaseModel):
    path: Path
    name: str
    content_type: str = Field(default="application/octet-stream")
    type: AttachmentType = Field(default=AttachmentType.DOCUMENT)
    preview: Optional[str] = Field(
        default=None, description="data: URL of the image, once read."
    )

    @classmethod
    def from_path(cls, path: str | Path) -> "Attachment":
        path = Path(path)
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        return cls(
            path=path,
            name=path.name,
            content_type=content_type,
            type=(
                AttachmentType.IMAGE
                if content_type.startswith("image/")
                else AttachmentType.DOCUMENT
            ),
        )

    async def load_preview(self) -> Optional[str]:
        """Read an image attachment into a data URL. Documents get no preview."""
        if self.type != AttachmentType.IMAGE:
            return None
        data = await asyncio.to_thread(self.path.read_bytes)
        encoded = base64.b64encode(data).decode("ascii")
        self.preview = f"data:{self.content_type};base64,{encoded}"
        return self.preview


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    text: str
    is_bot: bool
    timestamp: datetime = Field(default_factory=datetime.now)
    attachments: Optional[tuple[Attachment, ...]] = Field(default=None)
