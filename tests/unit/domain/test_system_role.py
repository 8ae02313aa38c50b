import pytest

from src.domain.categories import CategoryCatalog
from src.domain.entities import SystemRole


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("admin", SystemRole.admin),
        ("Admin", SystemRole.admin),
        ("Super User", SystemRole.super_user),
        ("  super user ", SystemRole.super_user),
        ("super-user", SystemRole.super_user),
        ("SUPER_USER", SystemRole.super_user),
        ("User", SystemRole.user),
        (SystemRole.user, SystemRole.user),
    ],
)
def test_parse_normalizes_case_and_whitespace(raw, expected):
    assert SystemRole.parse(raw) == expected


@pytest.mark.parametrize("raw", ["", "owner", "superuser", None, 3])
def test_parse_rejects_unknown_roles(raw):
    with pytest.raises(ValueError):
        SystemRole.parse(raw)


def test_slug_and_label():
    assert SystemRole.super_user.slug == "super_user"
    assert SystemRole.super_user.label == "Super User"
    assert SystemRole.admin.label == "Admin"


def test_only_admin_and_super_user_are_unlimited():
    assert SystemRole.admin.has_unlimited_quota
    assert SystemRole.super_user.has_unlimited_quota
    assert not SystemRole.user.has_unlimited_quota


def test_category_catalog_resolves_case_insensitively():
    catalog = CategoryCatalog(["VIP", "Partner"])

    assert catalog.resolve("vip") == "VIP"
    assert catalog.resolve(" partner ") == "Partner"
    assert catalog.resolve("Media") is None
    assert "VIP" in catalog
    assert list(catalog) == ["VIP", "Partner"]
    assert catalog.zeros() == {"VIP": 0, "Partner": 0}


def test_category_catalog_requires_categories():
    with pytest.raises(ValueError):
        CategoryCatalog([])
