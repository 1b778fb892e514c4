"""
Tests for role-based feature access.
"""

import pytest
from app.core.permissions import Feature, PermissionResolver, ROLE_PERMISSIONS, Role


@pytest.fixture
def resolver():
    return PermissionResolver()


class TestRolePermissionTable:
    def test_admin_has_everything(self, resolver):
        assert resolver.allowed_features(Role.ADMIN) == frozenset(Feature)

    def test_accountant(self, resolver):
        assert resolver.allowed_features(Role.ACCOUNTANT) == {
            Feature.CLASSIFIER, Feature.VAT, Feature.LEVY, Feature.PAYE, Feature.REPORTS,
        }

    def test_employee(self, resolver):
        allowed = resolver.allowed_features(Role.EMPLOYEE)
        assert allowed == {Feature.CLASSIFIER, Feature.VAT}
        assert Feature.ADMIN not in allowed
        assert Feature.REPORTS not in allowed

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            ROLE_PERMISSIONS[Role.EMPLOYEE] = tuple(Feature)


class TestAccessChecks:
    def test_can_access(self, resolver):
        assert resolver.can_access(Role.EMPLOYEE, Feature.VAT) is True
        assert resolver.can_access(Role.EMPLOYEE, Feature.REPORTS) is False
        assert resolver.can_access(Role.ACCOUNTANT, Feature.ADMIN) is False

    def test_disallowed_view_falls_back_to_classifier(self, resolver):
        assert resolver.resolve_feature(Role.EMPLOYEE, Feature.REPORTS) == Feature.CLASSIFIER

    def test_allowed_view_is_kept(self, resolver):
        assert resolver.resolve_feature(Role.ACCOUNTANT, Feature.PAYE) == Feature.PAYE

    def test_default_feature_is_first_allowed(self, resolver):
        for role in Role:
            assert resolver.default_feature(role) == Feature.CLASSIFIER

    def test_custom_table(self):
        resolver = PermissionResolver({Role.EMPLOYEE: (Feature.VAT,)})
        assert resolver.default_feature(Role.EMPLOYEE) == Feature.VAT
        assert resolver.allowed_features(Role.ADMIN) == frozenset()
        assert resolver.default_feature(Role.ADMIN) == Feature.CLASSIFIER
        assert resolver.resolve_feature(Role.EMPLOYEE, Feature.CLASSIFIER) == Feature.CLASSIFIER
