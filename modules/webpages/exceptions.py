"""
Webpages module exceptions.
"""
from shared.domain.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)


class PageNotFoundError(EntityNotFoundError):
    """Raised when a page is not found."""

    def __init__(self, page_id):
        super().__init__(entity_name='Page', entity_id=str(page_id))
        self.page_id = page_id


class InvalidSlugError(ValidationError):
    """Raised when a slug cannot be used as a path segment."""

    def __init__(self, slug: str):
        super().__init__(message=f"Invalid page slug: '{slug}'", field='slug')
        self.slug = slug


class InvalidPageHierarchyError(BusinessRuleViolationError):
    """Raised when a move would make a page its own ancestor."""

    def __init__(self, message: str):
        super().__init__(message=message, rule='acyclic_hierarchy')
