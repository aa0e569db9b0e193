# Shared domain module
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    BusinessRuleViolationError,
    CyclicHierarchyError,
)
from .hierarchy import (
    ensure_leading_slash,
    split_path,
    get_ancestors,
    get_full_path,
    get_root_slug,
    get_excluded_folders,
    get_display_full_path,
)

__all__ = [
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'BusinessRuleViolationError',
    'CyclicHierarchyError',
    'ensure_leading_slash',
    'split_path',
    'get_ancestors',
    'get_full_path',
    'get_root_slug',
    'get_excluded_folders',
    'get_display_full_path',
]
