"""
Management command to wait until the inventory database accepts connections.

Usage:
    python manage.py wait_for_database
    python manage.py wait_for_database --attempts 10 --delay 1.5
"""

from django.core.management.base import BaseCommand, CommandError

from stockroom.db import get_alias, wait_for_database
from stockroom.exceptions import StorageError


class Command(BaseCommand):
    """Block until the database is reachable, with bounded retries."""

    help = 'Waits for the inventory database to accept connections'

    def add_arguments(self, parser):
        parser.add_argument(
            '--database',
            default=None,
            help='Database alias (default: STOCKROOM["DATABASE_ALIAS"])'
        )
        parser.add_argument(
            '--attempts',
            type=int,
            default=None,
            help='Maximum connection attempts'
        )
        parser.add_argument(
            '--delay',
            type=float,
            default=None,
            help='Seconds between attempts'
        )

    def handle(self, *args, **options):
        alias = get_alias(options['database'])
        try:
            wait_for_database(alias, options['attempts'], options['delay'])
        except StorageError as exc:
            raise CommandError(f'{exc.message} ({alias})') from exc

        self.stdout.write(self.style.SUCCESS(f'Database "{alias}" is available'))
