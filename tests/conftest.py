"""
Pytest configuration and fixtures.
"""
import pytest

from modules.webpages.models import PageModel
from modules.webpages.services import PageService


@pytest.fixture
def page_service():
    """Create a page service."""
    return PageService()


@pytest.fixture
def make_page(db):
    """Create pages directly through the ORM."""
    def _make_page(slug, parent=None, title=None):
        return PageModel.objects.create(
            title=title or slug.title(),
            slug=slug,
            parent=parent,
        )
    return _make_page


@pytest.fixture
def shop_tree(make_page):
    """Create /shop/widgets/blue plus a sibling root /about."""
    shop = make_page('shop')
    widgets = make_page('widgets', parent=shop)
    blue = make_page('blue', parent=widgets)
    about = make_page('about')
    return {
        'shop': shop,
        'widgets': widgets,
        'blue': blue,
        'about': about,
    }


@pytest.fixture
def shop_mapped(monkeypatch):
    """Hide the shop folder from display paths."""
    monkeypatch.setattr(PageModel, 'domain_mapped_folders', ('shop',))
