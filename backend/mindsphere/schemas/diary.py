"""
Pydantic schemas for Diary entity.
"""
from mindsphere.core.config import settings
from mindsphere.schemas.mood import TimestampedEntry


class DiaryEntry(TimestampedEntry):
    """Schema for a free-text diary entry."""
    content: str = ""

    @property
    def preview(self) -> str:
        """First characters of the content, with an ellipsis when truncated."""
        limit = settings.PREVIEW_LENGTH
        if len(self.content) > limit:
            return self.content[:limit] + "..."
        return self.content

    def with_content(self, content: str) -> "DiaryEntry":
        """Copy of this entry with new content; id and date are kept."""
        return self.model_copy(update={"content": content})
