"""
Management command to sync payment status from a saved MakeEdu class page.

Does what the browser extension does, for a page saved as HTML: every
student row is matched against stored requests and applied.

Usage:
    python manage.py sync_makeedu_page page.html
    python manage.py sync_makeedu_page page.html --dry-run
"""
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from infrastructure.bootstrap import get_container
from services.commands import SyncPaymentStatusCommand
from services.matching import ReconciliationMatcher, MatchOutcome, parse_payment_rows
from services.store import RequestStore


class Command(BaseCommand):
    help = 'Apply payment rows from a saved MakeEdu page to textbook requests'

    def add_arguments(self, parser):
        parser.add_argument('html_file', help='Saved MakeEdu page (HTML)')
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show match results without changing anything',
        )

    def handle(self, *args, **options):
        path = Path(options['html_file'])
        if not path.is_file():
            raise CommandError(f'File not found: {path}')

        rows = parse_payment_rows(path.read_text(encoding='utf-8'))
        if not rows:
            self.stdout.write(self.style.WARNING('No student rows found on the page.'))
            return

        self.stdout.write(f'Found {len(rows)} student row(s).\n')

        container = get_container()
        counts = {outcome: 0 for outcome in MatchOutcome}

        if options['dry_run']:
            matcher = ReconciliationMatcher()
            records = container.get(RequestStore).all()
            for row in rows:
                result = matcher.match(row.student_name, row.book_name, records)
                counts[result.outcome] += 1
                self._report(row, result.outcome.value)
            self._summary(counts)
            self.stdout.write(self.style.WARNING('--dry-run mode: No changes made.'))
            return

        command = container.get(SyncPaymentStatusCommand)
        for row in rows:
            result = command.execute(
                student_name=row.student_name,
                book_name=row.book_name,
                is_paid=row.is_paid,
            )
            if result.outcome is None:
                raise CommandError(f'{row.student_name}: {result.error}')
            counts[MatchOutcome(result.outcome)] += 1
            self._report(row, result.outcome)

        self._summary(counts)

    def _report(self, row, outcome: str) -> None:
        paid = '납부' if row.is_paid else '미납'
        line = f'  - {row.student_name} | {row.book_name} | {paid} -> {outcome}'
        if outcome == MatchOutcome.MATCHED.value:
            self.stdout.write(self.style.SUCCESS(line))
        else:
            self.stdout.write(line)

    def _summary(self, counts) -> None:
        self.stdout.write(
            f"\nmatched: {counts[MatchOutcome.MATCHED]}, "
            f"not found: {counts[MatchOutcome.NOT_FOUND]}, "
            f"ambiguous: {counts[MatchOutcome.AMBIGUOUS]}"
        )
