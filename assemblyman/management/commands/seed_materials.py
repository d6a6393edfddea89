"""
Seed workshop materials from ASSEMBLYMAN["MATERIALS"].

Usage:
    python manage.py seed_materials
    python manage.py seed_materials --missing
"""

from django.core.management.base import BaseCommand

from assemblyman.services.seeding import seed_materials


class Command(BaseCommand):
    help = "Creates the configured workshop materials with zero stock"

    def add_arguments(self, parser):
        parser.add_argument(
            "--missing",
            action="store_true",
            help="Add configured materials that do not exist yet, even if the table is not empty",
        )

    def handle(self, *args, **options):
        created = seed_materials(only_missing=options["missing"])

        if not created:
            self.stdout.write("Nothing to seed.")
            return

        for material in created:
            self.stdout.write(f"  + {material.name} ({material.unit}, reorder at {material.reorder_point})")
        self.stdout.write(self.style.SUCCESS(f"Seeded {len(created)} materials."))
