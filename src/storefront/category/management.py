"""Category management: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.domain import storefront


@storefront.command(part_of="Category")
class CreateCategory:
    name = String(required=True, max_length=100)
    slug = String(required=True, max_length=100)
    icon = String(max_length=100)


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        if repo.find_by_slug(command.slug) is not None:
            raise ValidationError({"slug": [f"Category with slug '{command.slug}' already exists"]})

        category = Category.create(
            name=command.name,
            slug=command.slug,
            icon=command.icon,
        )
        repo.add(category)
        return str(category.id)
