from __future__ import annotations

import pytest
from django.db import IntegrityError, transaction
from django.utils import timezone

from library.models import Content, ContentRating
from library.services import rate_content, recompute_rating


def _content(owner, **kwargs):
    fields = {"title": "Organic chemistry notes", "type": "pdf"}
    fields.update(kwargs)
    return Content.objects.create(uploaded_by=owner, **fields)


@pytest.mark.django_db
def test_mean_is_rounded_and_count_stored(make_user):
    owner = make_user("owner")
    content = _content(owner)
    for i, value in enumerate([4, 5, 3]):
        rate_content(content, make_user(f"r{i}"), value)
    content.refresh_from_db()
    assert (content.rating, content.rating_count) == (4, 3)


@pytest.mark.django_db
def test_half_mean_rounds_up(make_user):
    content = _content(make_user("owner"))
    rate_content(content, make_user("a"), 4)
    rate_content(content, make_user("b"), 5)
    content.refresh_from_db()
    # 4.5 -> 5, where the built-in round would give 4
    assert (content.rating, content.rating_count) == (5, 2)


@pytest.mark.django_db
def test_rerating_replaces_previous_value(make_user):
    content = _content(make_user("owner"))
    rater = make_user("rater")
    rate_content(content, rater, 2, "meh")
    rate_content(content, rater, 5, "better on reread")
    content.refresh_from_db()
    assert ContentRating.objects.filter(content=content, user=rater).count() == 1
    row = ContentRating.objects.get(content=content, user=rater)
    assert (row.rating, row.review) == (5, "better on reread")
    assert (content.rating, content.rating_count) == (5, 1)


@pytest.mark.django_db
def test_recompute_without_ratings_resets_to_zero(make_user):
    content = _content(make_user("owner"))
    Content.objects.filter(pk=content.pk).update(rating=3, rating_count=9)
    assert recompute_rating(content.pk) == (0, 0)
    content.refresh_from_db()
    assert (content.rating, content.rating_count) == (0, 0)


@pytest.mark.django_db
def test_one_rating_per_user_enforced_by_store(make_user):
    content = _content(make_user("owner"))
    rater = make_user("rater")
    ContentRating.objects.create(content=content, user=rater, rating=3, created_at=timezone.now())
    with pytest.raises(IntegrityError):
        with transaction.atomic():
            ContentRating.objects.create(content=content, user=rater, rating=4, created_at=timezone.now())


@pytest.mark.django_db
def test_rating_range_enforced_by_store(make_user):
    content = _content(make_user("owner"))
    with pytest.raises(IntegrityError):
        with transaction.atomic():
            ContentRating.objects.create(content=content, user=make_user("r"), rating=6, created_at=timezone.now())
