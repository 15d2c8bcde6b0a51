"""Session data models."""

from dataclasses import dataclass, field
from datetime import datetime

from pageforge.repository import PageRepository


@dataclass
class EditorSession:
    """Represents an active editor session (browser tab) and its document."""

    id: str  # Tab/session ID
    created_at: datetime = field(default_factory=datetime.now)
    last_activity: datetime = field(default_factory=datetime.now)
    repository: PageRepository = field(default_factory=PageRepository)

    def to_summary(self) -> dict:
        """Get summary dict for API response."""
        current_page = self.repository.current_page
        return {
            "id": self.id,
            "created_at": int(self.created_at.timestamp() * 1000),
            "last_activity": int(self.last_activity.timestamp() * 1000),
            "page_count": len(self.repository.pages),
            "current_page_id": self.repository.current_page_id,
            "current_page_title": current_page.title if current_page else None,
        }

    def to_detail(self) -> dict:
        """Get detailed dict for API response."""
        return {
            "id": self.id,
            "created_at": int(self.created_at.timestamp() * 1000),
            "last_activity": int(self.last_activity.timestamp() * 1000),
            "state": self.repository.to_api_dict(),
        }

    def update_activity(self) -> None:
        """Update last activity timestamp."""
        self.last_activity = datetime.now()
