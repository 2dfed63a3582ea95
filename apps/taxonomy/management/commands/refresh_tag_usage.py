from django.core.management.base import BaseCommand

from apps.taxonomy.conf import taxonomy_setting
from apps.taxonomy.infrastructure.container import get_taxonomy_service


class Command(BaseCommand):
    help = "Recount how many products use each tag, optionally removing unused tags"

    def add_arguments(self, parser):
        parser.add_argument(
            '--cleanup',
            action='store_true',
            help='Also delete non-system tags without products that have not been used recently',
        )
        parser.add_argument(
            '--older-than-days',
            type=int,
            default=None,
            help='Idle period before an unused tag is removed (defaults to UNUSED_TAG_RETENTION_DAYS)',
        )

    def handle(self, *args, **options):
        service = get_taxonomy_service()

        updated = service.refresh_tag_usage()
        self.stdout.write(self.style.SUCCESS(f"Updated usage counts for {updated} tag(s)."))

        if options['cleanup']:
            days = options['older_than_days'] or taxonomy_setting('UNUSED_TAG_RETENTION_DAYS')
            removed = service.clean_unused_tags(older_than_days=days)
            self.stdout.write(self.style.SUCCESS(f"Removed {removed} unused tag(s) idle for {days}+ days."))
