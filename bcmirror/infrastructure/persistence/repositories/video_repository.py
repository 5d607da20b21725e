"""
Implementation SQLModel du repository Video.

Implemente l'interface IVideoRepository, y compris la recherche LIKE
utilisee par la recherche par mots-cles.
"""

import json
from typing import Sequence

from sqlalchemy import or_
from sqlmodel import select

from bcmirror.core.entities.video import BrightcoveVideo, VideoStatus
from bcmirror.core.ports.repositories import IVideoRepository
from bcmirror.infrastructure.persistence.models import VideoModel
from bcmirror.infrastructure.persistence.repositories.base import (
    SQLModelRecordRepository,
    as_utc,
)


class SQLModelVideoRepository(
    SQLModelRecordRepository[BrightcoveVideo], IVideoRepository
):
    """Repository SQLModel pour les videos."""

    model_class = VideoModel
    remote_id_column = "video_id"

    def _to_entity(self, model: VideoModel) -> BrightcoveVideo:
        tags = json.loads(model.tags_json) if model.tags_json else []
        custom_fields = (
            json.loads(model.custom_fields_json) if model.custom_fields_json else {}
        )
        return BrightcoveVideo(
            id=model.id,
            video_id=model.video_id,
            api_client=model.api_client,
            player=model.player,
            name=model.name,
            description=model.description,
            long_description=model.long_description,
            reference_id=model.reference_id,
            state=model.state,
            status=VideoStatus(model.status),
            duration=model.duration,
            economics=model.economics,
            tags=tuple(tags),
            related_link_url=model.related_link_url,
            related_link_title=model.related_link_title,
            poster_url=model.poster_url,
            thumbnail_url=model.thumbnail_url,
            custom_fields=custom_fields,
            schedule_starts_at=as_utc(model.schedule_starts_at),
            schedule_ends_at=as_utc(model.schedule_ends_at),
            created_at=as_utc(model.created_at),
            changed_at=as_utc(model.changed_at),
        )

    def _apply(self, entity: BrightcoveVideo, model: VideoModel) -> None:
        model.video_id = entity.video_id
        model.player = entity.player
        model.name = entity.name
        model.description = entity.description
        model.long_description = entity.long_description
        model.reference_id = entity.reference_id
        model.state = entity.state
        model.status = int(entity.status)
        model.duration = entity.duration
        model.economics = entity.economics
        model.tags_json = json.dumps(list(entity.tags)) if entity.tags else None
        model.related_link_url = entity.related_link_url
        model.related_link_title = entity.related_link_title
        model.poster_url = entity.poster_url
        model.thumbnail_url = entity.thumbnail_url
        model.custom_fields_json = (
            json.dumps(entity.custom_fields, sort_keys=True)
            if entity.custom_fields
            else None
        )
        model.schedule_starts_at = entity.schedule_starts_at
        model.schedule_ends_at = entity.schedule_ends_at
        model.created_at = entity.created_at
        model.changed_at = entity.changed_at

    def search(
        self,
        like_pattern: str,
        statuses: Sequence[int],
        limit: int = 15,
    ) -> list[BrightcoveVideo]:
        """Recherche LIKE sur le nom, les descriptions et le titre du lien."""
        if not statuses:
            return []

        statement = (
            select(VideoModel)
            .where(
                or_(
                    VideoModel.name.like(like_pattern, escape="\\"),
                    VideoModel.description.like(like_pattern, escape="\\"),
                    VideoModel.long_description.like(like_pattern, escape="\\"),
                    VideoModel.related_link_title.like(like_pattern, escape="\\"),
                )
            )
            .where(VideoModel.status.in_([int(status) for status in statuses]))
            .order_by(VideoModel.created_at.desc(), VideoModel.id.desc())
            .limit(limit)
        )
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]
