"""
Webpages business logic services.
"""
import logging
from typing import List, Optional, Dict, Any

from django.db import transaction
from django.utils import timezone

from shared.domain.hierarchy import PATH_SEPARATOR, get_ancestors

from .models import PageModel
from .exceptions import (
    PageNotFoundError,
    InvalidSlugError,
    InvalidPageHierarchyError,
)

logger = logging.getLogger(__name__)


class PageService:
    """Service for page operations."""

    def get_page_by_id(self, page_id: int) -> Optional[PageModel]:
        """Get page by ID."""
        try:
            return PageModel.objects.with_parent().get(id=page_id, deleted_at__isnull=True)
        except PageModel.DoesNotExist:
            return None

    def get_page_by_path(self, path: str) -> Optional[PageModel]:
        """
        Get the page living at a raw full path.

        Slugs are only unique among siblings and are not validated, so
        several pages may share a path. The first one is returned. Pages
        below a deleted ancestor are hidden, as in the page tree.
        """
        pages = [
            page
            for page in PageModel.objects.filter(deleted_at__isnull=True).with_parent().where_full_path(path)
            if not any(ancestor.is_deleted for ancestor in page.ancestors)
        ]
        if not pages:
            return None
        if len(pages) > 1:
            logger.warning(f"{len(pages)} pages share the path {path}, returning page {pages[0].id}")
        return pages[0]

    def get_root_pages(self) -> List[PageModel]:
        """Get top-level pages (no parent)."""
        return list(
            PageModel.objects.filter(
                parent__isnull=True,
                deleted_at__isnull=True
            )
        )

    def get_children(self, page_id: int) -> List[PageModel]:
        """Get direct children of a page."""
        return list(
            PageModel.objects.with_parent().filter(
                parent_id=page_id,
                deleted_at__isnull=True
            )
        )

    def get_page_tree(self) -> List[Dict[str, Any]]:
        """Get full page tree structure."""
        return [self._build_tree_node(page) for page in self.get_root_pages()]

    @transaction.atomic
    def create_page(
        self,
        title: str,
        slug: str,
        parent_id: Optional[int] = None,
    ) -> PageModel:
        """Create a new page."""
        self._validate_slug(slug)

        parent = None
        if parent_id:
            parent = self.get_page_by_id(parent_id)
            if not parent:
                raise PageNotFoundError(page_id=parent_id)

        page = PageModel.objects.create(
            title=title,
            slug=slug,
            parent=parent,
        )

        logger.info(f"Created page: {page.get_full_path()} ({page.id})")
        return page

    @transaction.atomic
    def move_page(self, page_id: int, parent_id: Optional[int]) -> PageModel:
        """Attach a page to a new parent, or make it a root when parent_id is None."""
        page = self.get_page_by_id(page_id)
        if not page:
            raise PageNotFoundError(page_id=page_id)

        if parent_id is None:
            page.parent = None
        else:
            if parent_id == page_id:
                raise InvalidPageHierarchyError("Page cannot be its own parent")
            new_parent = self.get_page_by_id(parent_id)
            if not new_parent:
                raise PageNotFoundError(page_id=parent_id)
            if any(ancestor.id == page.id for ancestor in get_ancestors(new_parent)):
                raise InvalidPageHierarchyError("Page cannot be moved below one of its descendants")
            page.parent = new_parent

        page.save()
        logger.info(f"Moved page {page.id} to {page.get_full_path()}")
        return page

    @transaction.atomic
    def delete_page(self, page_id: int) -> bool:
        """Soft delete a page."""
        page = self.get_page_by_id(page_id)
        if not page:
            raise PageNotFoundError(page_id=page_id)

        page.deleted_at = timezone.now()
        page.save()
        logger.info(f"Deleted page: {page_id}")
        return True

    def _validate_slug(self, slug: str) -> None:
        if not slug or PATH_SEPARATOR in slug:
            raise InvalidSlugError(slug=slug)

    def _build_tree_node(self, page: PageModel) -> Dict[str, Any]:
        """Build a tree node for page."""
        children = PageModel.objects.filter(
            parent=page,
            deleted_at__isnull=True
        )

        return {
            'id': page.id,
            'title': page.title,
            'slug': page.slug,
            'full_path': page.full_path,
            'children': [self._build_tree_node(child) for child in children],
        }
