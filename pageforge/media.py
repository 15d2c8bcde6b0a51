"""Uploaded media library.

Elements reference media through their props (``mediaId`` and ``mediaUrl``).
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .elements import Page, new_id, utc_now
from .tree import iter_elements

MEDIA_ID_PROP = 'mediaId'
MEDIA_URL_PROP = 'mediaUrl'


class UploadedMedia(BaseModel):
    """An uploaded media file."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id)
    name: str
    url: str
    content_type: str = Field(default='application/octet-stream', alias='type')
    size: int = Field(default=0, ge=0)
    created_at: str = Field(default_factory=utc_now, alias='createdAt')

    def to_api_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode='json')


class MediaLibrary:
    """Ordered collection of uploaded media records."""

    def __init__(self):
        self._items: list[UploadedMedia] = []

    @property
    def items(self) -> list[UploadedMedia]:
        return list(self._items)

    def add(self, name: str, url: str, content_type: str = 'application/octet-stream',
            size: int = 0) -> UploadedMedia:
        media = UploadedMedia(name=name, url=url, content_type=content_type, size=size)
        self._items.append(media)
        return media

    def get(self, media_id: str) -> Optional[UploadedMedia]:
        for media in self._items:
            if media.id == media_id:
                return media
        return None

    def remove(self, media_id: str, pages: list[Page]) -> Optional[int]:
        """
        Remove a media record and scrub references to it from all pages.

        Every element whose ``props['mediaId']`` matches loses both its
        ``mediaId`` and ``mediaUrl`` props.

        Args:
            media_id: Id of the media record
            pages: Pages to scrub

        Returns:
            Number of elements whose props were scrubbed, or None if the
            record does not exist
        """
        media = self.get(media_id)
        if media is None:
            return None
        self._items.remove(media)

        scrubbed = 0
        for page in pages:
            for element in iter_elements(page.elements):
                if element.props.get(MEDIA_ID_PROP) == media_id:
                    element.props.pop(MEDIA_ID_PROP, None)
                    element.props.pop(MEDIA_URL_PROP, None)
                    scrubbed += 1
        return scrubbed
