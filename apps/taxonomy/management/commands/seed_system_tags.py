from django.core.management.base import BaseCommand

from apps.taxonomy.application.dtos import TagCreateDTO, TagFilterDTO
from apps.taxonomy.conf import taxonomy_setting
from apps.taxonomy.domain.services.naming import normalize_name
from apps.taxonomy.domain.value_objects.tag_scope import TagScope
from apps.taxonomy.infrastructure.container import get_taxonomy_service


class Command(BaseCommand):
    help = "Create the platform's system tags. Existing global tags with the same name are left alone."

    def handle(self, *args, **kwargs):
        service = get_taxonomy_service()
        existing = {
            normalize_name(tag.name)
            for tag in service.list_tags(TagFilterDTO(scope=TagScope.GLOBAL, include_inactive=True))
        }

        created_count = 0
        skipped_count = 0
        for item in taxonomy_setting('SYSTEM_TAGS'):
            if normalize_name(item['name']) in existing:
                skipped_count += 1
                continue
            service.create_tag(
                TagCreateDTO(
                    name=item['name'],
                    description=item.get('description', ''),
                    color=item.get('color', taxonomy_setting('DEFAULT_TAG_COLOR')),
                    is_system=True,
                )
            )
            existing.add(normalize_name(item['name']))
            created_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded system tags: {created_count} created, {skipped_count} already present."
            )
        )
