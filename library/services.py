"""Content writes: upload, edit, delete and the rating aggregate.

`rate_content` is the only writer of `Content.rating` and
`Content.rating_count`.
"""
from __future__ import annotations

import logging
from typing import Any

from django.db import transaction
from django.db.models import Avg, Count
from django.utils import timezone

from activity.models import UserActivity
from activity.services import log_activity
from assessments.grading import round_half_up

from .models import Content, ContentRating

logger = logging.getLogger(__name__)

# Fields callers may never set directly on Content
DERIVED_FIELDS = frozenset({"rating", "rating_count", "download_count", "uploaded_by", "file_size"})


def recompute_rating(content_id: int) -> tuple[int, int]:
    """Recompute and store the rounded mean and count for one content row.

    Returns `(rating, rating_count)`. Content with no ratings goes back
    to `(0, 0)`.
    """
    agg = ContentRating.objects.filter(content_id=content_id).aggregate(avg=Avg("rating"), count=Count("id"))
    count = agg["count"] or 0
    rating = round_half_up(agg["avg"]) if count else 0
    Content.objects.filter(pk=content_id).update(rating=rating, rating_count=count)
    return rating, count


@transaction.atomic
def rate_content(content: Content, user, rating: int, review: str | None = None) -> ContentRating:
    """Upsert `user`'s rating of `content`, then refresh the aggregates.

    The content row is locked for the whole unit of work so concurrent
    raters on the same content serialise instead of racing on the
    recompute.
    """
    Content.objects.select_for_update().only("pk").get(pk=content.pk)
    obj, created = ContentRating.objects.update_or_create(
        content=content,
        user=user,
        defaults={"rating": rating, "review": review or "", "created_at": timezone.now()},
    )
    content.rating, content.rating_count = recompute_rating(content.pk)
    logger.info(
        "content %s %s rating %s by user %s; now %s from %s ratings",
        content.pk, "new" if created else "updated", rating, user.pk, content.rating, content.rating_count,
    )
    return obj


@transaction.atomic
def upload_content(user, file, **fields: Any) -> Content:
    content = Content(uploaded_by=user, file=file, **fields)
    content.save()
    log_activity(
        user,
        UserActivity.TYPE_CONTENT_UPLOAD,
        f'Uploaded "{content.title}"',
        {"contentId": content.pk, "type": content.type},
    )
    logger.info("content %s uploaded by user %s (%s bytes)", content.pk, user.pk, content.file_size)
    return content


def update_content(content: Content, changes: dict[str, Any]) -> Content:
    allowed = {k: v for k, v in changes.items() if k not in DERIVED_FIELDS}
    for field, value in allowed.items():
        setattr(content, field, value)
    content.save(update_fields=[*allowed.keys(), "updated_at"])
    return content


def delete_content(content: Content) -> None:
    """Delete the row, then the stored file."""
    file = content.file
    name = file.name if file else ""
    content.delete()
    if name:
        file.storage.delete(name)
    logger.info("content deleted; file %r removed", name)
