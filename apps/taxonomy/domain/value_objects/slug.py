"""
Slug value object.
"""
import re
import unicodedata
from dataclasses import dataclass, field

from shared.domain import ValueObject
from ..exceptions import InvalidTaxonomyInputError

_DISALLOWED = re.compile(r'[^a-z0-9\s-]')
_WHITESPACE = re.compile(r'\s+')
_HYPHENS = re.compile(r'-+')

SLUG_MAX_LENGTH = 120


def derive_slug(text: str) -> str:
    """
    Build a URL-safe slug from free text.

    Accented letters are folded to ASCII, everything else that is not a
    letter, digit, space or hyphen is dropped. Already-slugified input comes
    back unchanged.
    """
    folded = unicodedata.normalize('NFKD', text or '').encode('ascii', 'ignore').decode('ascii')
    slug = _DISALLOWED.sub('', folded.lower())
    slug = _WHITESPACE.sub('-', slug)
    slug = _HYPHENS.sub('-', slug)
    return slug.strip('-')


@dataclass(frozen=True)
class Slug(ValueObject):
    """URL-safe identifier derived from a name."""
    value: str
    max_length: int = field(default=SLUG_MAX_LENGTH, compare=False, repr=False)

    def validate(self) -> None:
        if not self.value or derive_slug(self.value) != self.value:
            raise InvalidTaxonomyInputError(
                f"Invalid slug: '{self.value}'. Use lowercase letters, digits and single hyphens",
                field="slug",
            )
        if len(self.value) > self.max_length:
            raise InvalidTaxonomyInputError(
                f"Slug cannot exceed {self.max_length} characters",
                field="slug",
            )

    @classmethod
    def from_text(cls, text: str, max_length: int = SLUG_MAX_LENGTH) -> 'Slug':
        """Derive a slug from a name."""
        derived = derive_slug(text)
        if not derived:
            raise InvalidTaxonomyInputError(
                f"Cannot derive a slug from '{text}'",
                field="slug",
            )
        return cls(value=derived, max_length=max_length)

    def __str__(self) -> str:
        return self.value
