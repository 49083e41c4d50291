# hs_core/assignments/management/commands/reconcile_beds.py
from __future__ import annotations

from django.core.management.base import BaseCommand

from hs_core.assignments.services import AssignmentService


class Command(BaseCommand):
    help = "Recompute every bed's Available/Occupied status from its live (Planned/Active) assignments."

    def add_arguments(self, parser):
        parser.add_argument("--dry-run", action="store_true", help="Print counts only; do not write.")

    def handle(self, *args, **opts):
        dry = opts["dry_run"]

        examined, changed = AssignmentService.reconcile_all_beds(dry_run=dry)

        self.stdout.write(f"Beds examined: {examined}")
        label = "Beds that would change" if dry else "Beds changed"
        self.stdout.write(self.style.SUCCESS(f"{label}: {changed}"))
