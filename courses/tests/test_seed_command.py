from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command

from courses.management.commands.seed_institutions import PROGRAMMES, UNIVERSITIES
from courses.models import Institution, Programme


@pytest.mark.django_db
def test_seed_creates_institutions_and_programmes():
    out = StringIO()
    call_command("seed_institutions", stdout=out)
    assert Institution.objects.count() == len(UNIVERSITIES)
    assert Programme.objects.count() == len(UNIVERSITIES) * len(PROGRAMMES)
    assert "Seeded" in out.getvalue()


@pytest.mark.django_db
def test_seed_is_a_no_op_when_institutions_exist():
    Institution.objects.create(name="Existing", country="Ghana")
    out = StringIO()
    call_command("seed_institutions", stdout=out)
    assert Institution.objects.count() == 1
    assert Programme.objects.count() == 0
    assert "already seeded" in out.getvalue()


@pytest.mark.django_db
def test_seed_twice_does_not_duplicate():
    call_command("seed_institutions", stdout=StringIO())
    call_command("seed_institutions", stdout=StringIO())
    assert Institution.objects.count() == len(UNIVERSITIES)
