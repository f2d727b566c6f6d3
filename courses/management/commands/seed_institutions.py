"""Seed demo institutions and a common set of programmes for each."""
from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction

from courses.models import Institution, InstitutionType, Programme


UNIVERSITIES = [
    ("University of Lagos", "https://unilag.edu.ng"),
    ("University of Ibadan", "https://ui.edu.ng"),
    ("Ahmadu Bello University", "https://abu.edu.ng"),
    ("University of Nigeria, Nsukka", "https://unn.edu.ng"),
    ("Obafemi Awolowo University", "https://oauife.edu.ng"),
    ("University of Ilorin", "https://unilorin.edu.ng"),
    ("Lagos State University", "https://lasu.edu.ng"),
    ("Covenant University", "https://covenantuniversity.edu.ng"),
]

PROGRAMMES = [
    "Computer Science", "Software Engineering", "Information Technology", "Electrical Engineering",
    "Mechanical Engineering", "Civil Engineering", "Medicine", "Pharmacy", "Law", "Business Administration",
    "Economics", "Accounting", "Mass Communication", "English Literature", "Mathematics", "Physics",
    "Chemistry", "Biology", "Psychology", "Political Science",
]


class Command(BaseCommand):
    help = "Seed demo institutions and programmes (no-op when institutions already exist)."

    def handle(self, *args, **options):
        existing = Institution.objects.count()
        if existing:
            self.stdout.write(f"Data already seeded ({existing} institutions).")
            return
        with transaction.atomic():
            institutions = [
                Institution.objects.create(name=name, type=InstitutionType.UNIVERSITY, country="Nigeria", website=site)
                for name, site in UNIVERSITIES
            ]
            programmes = [
                Programme(institution=inst, name=name, description=f"{name} programme at {inst.name}")
                for inst in institutions
                for name in PROGRAMMES
            ]
            Programme.objects.bulk_create(programmes)
        self.stdout.write(
            self.style.SUCCESS(f"Seeded {len(institutions)} institutions and {len(programmes)} programmes.")
        )
