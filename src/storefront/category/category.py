"""Category aggregate: flat grouping used to browse the catalogue."""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from storefront.domain import storefront

_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


@storefront.aggregate(limit=None)
class Category:
    """A named, slug-addressable category. Categories do not change once created."""

    name = String(required=True, max_length=100)
    slug = String(required=True, max_length=100)
    icon = String(max_length=100)

    @invariant.post
    def slug_must_be_url_safe(self):
        if self.slug and not _SLUG_PATTERN.match(self.slug):
            raise ValidationError(
                {"slug": ["Slug must contain only lowercase alphanumeric characters separated by single hyphens"]}
            )

    @classmethod
    def create(cls, name, slug, icon=None):
        from storefront.category.events import CategoryCreated

        category = cls(name=name, slug=slug, icon=icon)
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                slug=slug,
            )
        )
        return category
