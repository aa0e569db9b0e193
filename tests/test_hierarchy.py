"""
Tests for slug path resolution on plain objects.
"""
import pytest

from shared.domain.exceptions import CyclicHierarchyError
from shared.domain.hierarchy import (
    ensure_leading_slash,
    split_path,
    get_ancestors,
    get_full_path,
    get_root_slug,
    get_excluded_folders,
    get_display_full_path,
)


class Node:
    def __init__(self, slug, parent=None):
        self.slug = slug
        self.parent = parent


class MappedNode(Node):
    domain_mapped_folders = ['shop']


def chain(*slugs, node_class=Node):
    node = None
    for slug in slugs:
        node = node_class(slug, parent=node)
    return node


class TestPathHelpers:

    @pytest.mark.parametrize('value, expected', [
        ('a', '/a'),
        ('/a', '/a'),
        ('//a/b', '/a/b'),
        ('', '/'),
        (None, '/'),
    ])
    def test_ensure_leading_slash(self, value, expected):
        assert ensure_leading_slash(value) == expected

    def test_split_path_drops_empty_segments(self):
        assert split_path('/a//b/') == ['a', 'b']
        assert split_path('') == []
        assert split_path('/') == []


class TestFullPath:

    def test_root_node(self):
        assert get_full_path(Node('shop')) == '/shop'

    def test_chain(self):
        assert get_full_path(chain('root', 'a', 'b', 'c')) == '/root/a/b/c'

    def test_is_stable(self):
        node = chain('shop', 'widgets')
        assert get_full_path(node) == get_full_path(node)

    def test_empty_slug_leaves_empty_segment(self):
        node = chain('a', '', 'c')
        assert get_full_path(node) == '/a//c'
        assert get_display_full_path(node) == '/a/c'

    def test_empty_root_slug(self):
        assert get_full_path(chain('', 'a')) == '/a'

    def test_ancestors_are_root_first(self):
        node = chain('root', 'a', 'b')
        assert [item.slug for item in get_ancestors(node)] == ['root', 'a']
        assert get_ancestors(Node('root')) == []


class TestCyclicHierarchy:

    def test_self_parent(self):
        node = Node('loop')
        node.parent = node
        with pytest.raises(CyclicHierarchyError) as exc_info:
            get_full_path(node)
        assert exc_info.value.code == 'CYCLIC_HIERARCHY'
        assert exc_info.value.node_key == 'loop'

    def test_two_node_loop(self):
        a = Node('a')
        b = Node('b', parent=a)
        a.parent = b
        with pytest.raises(CyclicHierarchyError):
            get_full_path(b)
        with pytest.raises(CyclicHierarchyError):
            get_root_slug(a)


class TestRootSlug:

    def test_returns_topmost_ancestor(self):
        assert get_root_slug(chain('root', 'a', 'b')) == 'root'

    def test_root_node(self):
        assert get_root_slug(Node('root')) == 'root'

    def test_no_segments(self):
        assert get_root_slug(Node('')) is None


class TestDisplayFullPath:

    def test_without_exclusions(self):
        assert get_excluded_folders(Node('a')) == ()
        assert get_display_full_path(chain('shop', 'widgets')) == '/shop/widgets'

    def test_excludes_configured_folder(self):
        node = chain('shop', 'widgets', node_class=MappedNode)
        assert get_full_path(node) == '/shop/widgets'
        assert get_display_full_path(node) == '/widgets'

    def test_excludes_folder_at_any_depth(self):
        node = chain('a', 'shop', 'b', node_class=MappedNode)
        assert get_display_full_path(node) == '/a/b'

    def test_excludes_terminal_slug_only_when_listed(self):
        assert get_display_full_path(chain('a', 'shop', node_class=MappedNode)) == '/a'
        assert get_display_full_path(chain('shop', 'shops', node_class=MappedNode)) == '/shops'

    def test_explicit_exclusions(self):
        node = chain('en', 'docs', 'intro')
        assert get_display_full_path(node, excluded=['en', 'docs']) == '/intro'

    def test_single_string_folder(self):
        node = Node('shop')
        node.domain_mapped_folders = 'shop'
        assert get_excluded_folders(node) == ('shop',)
        assert get_display_full_path(node) == '/'
