"""
Webpages models.
"""
from django.db import models

from shared.infrastructure.hierarchy import HasParentMixin


class PageModel(HasParentMixin):
    """Web page addressed by the slugs of its parent chain."""

    title = models.CharField(
        max_length=200,
        verbose_name='Title'
    )
    slug = models.SlugField(
        max_length=100,
        db_index=True,
        verbose_name='Slug',
        help_text='Unique among siblings only'
    )
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='children',
        verbose_name='Parent page'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated at'
    )
    deleted_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Deleted at'
    )

    # Folders that only exist to route sub-domains, e.g. ('shop',).
    domain_mapped_folders = ()

    class Meta:
        db_table = 'pages'
        verbose_name = 'Page'
        verbose_name_plural = 'Pages'
        ordering = ['slug', 'id']

    def __str__(self):
        return f"{self.title} ({self.get_full_path()})"

    @property
    def is_deleted(self) -> bool:
        """Check if page is soft deleted."""
        return self.deleted_at is not None
