"""
Slug path resolution for hierarchical nodes.

A node is any object exposing a ``slug`` string and an optional ``parent``
node of the same kind. Nothing here touches the database directly; walking
``parent`` may trigger a lazy ORM lookup, which is the caller's concern.
"""
from typing import Any, Iterable, List, Optional, Tuple

from .exceptions import CyclicHierarchyError

PATH_SEPARATOR = '/'


def ensure_leading_slash(value: Optional[str]) -> str:
    """Prefix ``value`` with exactly one path separator."""
    return PATH_SEPARATOR + (value or '').lstrip(PATH_SEPARATOR)


def split_path(path: Optional[str]) -> List[str]:
    """Split a path into its non-empty segments."""
    return [segment for segment in (path or '').split(PATH_SEPARATOR) if segment]


def _node_key(node: Any) -> Tuple[type, Any]:
    pk = getattr(node, 'pk', None)
    if pk is None:
        return type(node), id(node)
    return type(node), pk


def get_ancestors(node: Any) -> List[Any]:
    """
    Return the parent chain of a node, root first.

    The node itself is not included.

    Raises:
        CyclicHierarchyError: If the chain revisits a node.
    """
    seen = {_node_key(node)}
    ancestors = []
    parent = getattr(node, 'parent', None)
    while parent is not None:
        key = _node_key(parent)
        if key in seen:
            raise CyclicHierarchyError(
                model_name=type(parent).__name__,
                node_key=getattr(parent, 'pk', None) or parent.slug,
            )
        seen.add(key)
        ancestors.append(parent)
        parent = getattr(parent, 'parent', None)
    ancestors.reverse()
    return ancestors


def get_full_path(node: Any) -> str:
    """
    Build the raw full path of a node from its slug and its ancestors' slugs.

    A root node yields ``/<slug>``; every descendant appends ``/<slug>`` to its
    parent's path. Empty slugs leave empty segments behind, so the raw path may
    contain ``//``. Use :func:`split_path` to read the segments back.
    """
    path = None
    for item in get_ancestors(node) + [node]:
        segment = ensure_leading_slash(item.slug)
        path = segment if path is None else ensure_leading_slash(path + segment)
    return path


def get_root_slug(node: Any) -> Optional[str]:
    """Return the slug of the topmost ancestor, or None for an all-empty path."""
    segments = split_path(get_full_path(node))
    return segments[0] if segments else None


def get_excluded_folders(node: Any) -> Tuple[str, ...]:
    """Read the folder slugs that the node's type hides from its display path."""
    folders = getattr(node, 'domain_mapped_folders', None)
    if not folders:
        return ()
    if isinstance(folders, str):
        return (folders,)
    return tuple(folders)


def get_display_full_path(node: Any, excluded: Optional[Iterable[str]] = None) -> str:
    """
    Build the externally visible path of a node.

    Same as the raw full path, minus empty segments and minus every segment
    listed in ``excluded`` (defaults to the node's ``domain_mapped_folders``).
    """
    if excluded is None:
        excluded = get_excluded_folders(node)
    excluded = set(excluded)

    segments = [
        segment for segment in split_path(get_full_path(node))
        if segment not in excluded
    ]
    return ensure_leading_slash(PATH_SEPARATOR.join(segments))
