"""
Django ORM support for models arranged in a slug hierarchy.

Any model may gain nested parents by inheriting ``HasParentMixin`` and
declaring a ``slug`` field plus a ``parent`` foreign key to itself with
``related_name='children'``. Folders used only for sub-domain routing can be
hidden from ``full_path`` by listing their slugs in ``domain_mapped_folders``.
"""
import logging
from typing import List, Optional

from django.core import checks
from django.db import models

from shared.domain.hierarchy import (
    ensure_leading_slash,
    get_ancestors,
    get_display_full_path,
    get_full_path,
    get_root_slug,
    split_path,
)

logger = logging.getLogger(__name__)


class HierarchyQuerySet(models.QuerySet):
    """QuerySet refinements for hierarchical models."""

    def with_parent(self) -> 'HierarchyQuerySet':
        """Eager load the ``parent`` relation."""
        return self.select_related('parent')

    def with_children(self) -> 'HierarchyQuerySet':
        """Eager load the ``children`` relation."""
        return self.prefetch_related('children')

    def where_full_path(self, path: str) -> List[models.Model]:
        """
        Fetch the items whose raw full path equals ``path``.

        Candidates are narrowed by their slug (the last path segment) in the
        database; each candidate's ancestor chain is then walked in memory.
        Excluded domain folders are not stripped before comparing.

        Args:
            path: Full path with or without a leading slash

        Returns:
            List of matching model instances, possibly empty
        """
        segments = split_path(path)
        if not segments:
            return []

        expected = ensure_leading_slash(path)
        candidates = self.filter(slug=segments[-1])
        matches = [item for item in candidates if get_full_path(item) == expected]
        logger.debug(f"where_full_path({expected}) matched {len(matches)} {self.model.__name__} rows")
        return matches


HierarchyManager = models.Manager.from_queryset(HierarchyQuerySet)


class HasParentMixin(models.Model):
    """
    Allow a model to have nested parents and derive slug paths from them.

    The host model must define ``slug`` and ``parent``; the reverse relation
    of ``parent`` must be named ``children``.
    """

    domain_mapped_folders = ()

    objects = HierarchyManager()

    class Meta:
        abstract = True

    def get_full_path(self, node: Optional['HasParentMixin'] = None) -> str:
        """Get the raw full path of ``node``, defaulting to this item."""
        return get_full_path(node if node is not None else self)

    def get_root_slug(self) -> Optional[str]:
        """Get the slug of the topmost ancestor."""
        return get_root_slug(self)

    def get_display_full_path(self) -> str:
        """Get the full path without the domain-mapped folders."""
        return get_display_full_path(self)

    @property
    def full_path(self) -> str:
        return self.get_display_full_path()

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def ancestors(self) -> list:
        """Parent chain of this item, root first."""
        return get_ancestors(self)

    @property
    def root_parent(self) -> Optional['HasParentMixin']:
        """
        Get the topmost ancestor, or None when this item is itself a root.

        The lookup matches on the root slug alone, so when two unrelated roots
        share a slug the first one found is returned.
        """
        if self.is_root:
            return None
        return type(self)._default_manager.filter(slug=self.get_root_slug()).first()

    @classmethod
    def check(cls, **kwargs):
        errors = super().check(**kwargs)
        if cls._meta.abstract:
            return errors
        errors.extend(cls._check_hierarchy_fields())
        return errors

    @classmethod
    def _check_hierarchy_fields(cls) -> list:
        errors = []
        field_names = {field.name for field in cls._meta.get_fields()}

        if 'slug' not in field_names:
            errors.append(
                checks.Error(
                    f"{cls.__name__} uses HasParentMixin but has no 'slug' field.",
                    obj=cls,
                    id='hierarchy.E001',
                )
            )

        parent = next(
            (field for field in cls._meta.concrete_fields if field.name == 'parent'),
            None,
        )
        if not parent or not parent.is_relation or parent.related_model is not cls:
            errors.append(
                checks.Error(
                    f"{cls.__name__} uses HasParentMixin but has no 'parent' foreign key to itself.",
                    hint="Add parent = models.ForeignKey('self', null=True, related_name='children', ...).",
                    obj=cls,
                    id='hierarchy.E002',
                )
            )
        elif parent.remote_field.related_name != 'children':
            errors.append(
                checks.Error(
                    f"{cls.__name__}.parent must use related_name='children'.",
                    hint="with_children() prefetches the 'children' relation.",
                    obj=cls,
                    id='hierarchy.E003',
                )
            )
        return errors
