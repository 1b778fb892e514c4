"""
Role-based feature access.

The role -> feature table is fixed for the life of the process. Callers get a
PermissionResolver built on it (or on a table of their own in tests).

Rendering a feature the role may not see silently falls back to the
classifier; it is never an error.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)


class Role(str, Enum):
    ADMIN = "Admin"
    ACCOUNTANT = "Accountant"
    EMPLOYEE = "Employee"


class Feature(str, Enum):
    CLASSIFIER = "classifier"
    VAT = "vat"
    LEVY = "levy"
    PAYE = "paye"
    REPORTS = "reports"
    ADMIN = "admin"


FEATURE_LABELS = {
    Feature.CLASSIFIER: "Classifier",
    Feature.VAT: "VAT Tracker",
    Feature.LEVY: "Levy Calculator",
    Feature.PAYE: "PAYE Calculator",
    Feature.REPORTS: "Filing Reports",
    Feature.ADMIN: "Admin Panel",
}

FALLBACK_FEATURE = Feature.CLASSIFIER

# Tuples keep the navigation order; the first entry is the role's landing view.
ROLE_PERMISSIONS: Mapping[Role, tuple[Feature, ...]] = MappingProxyType({
    Role.ADMIN: tuple(Feature),
    Role.ACCOUNTANT: (
        Feature.CLASSIFIER,
        Feature.VAT,
        Feature.LEVY,
        Feature.PAYE,
        Feature.REPORTS,
    ),
    Role.EMPLOYEE: (Feature.CLASSIFIER, Feature.VAT),
})


class PermissionResolver:
    def __init__(self, table: Mapping[Role, tuple[Feature, ...]] = ROLE_PERMISSIONS):
        self._table = table

    def allowed_features(self, role: Role) -> frozenset[Feature]:
        return frozenset(self._table.get(role, ()))

    def ordered_features(self, role: Role) -> list[Feature]:
        return list(self._table.get(role, ()))

    def can_access(self, role: Role, feature: Feature) -> bool:
        return feature in self._table.get(role, ())

    def resolve_feature(self, role: Role, feature: Feature) -> Feature:
        """Return the feature to render, falling back to the classifier."""
        if self.can_access(role, feature):
            return feature
        logger.info("Role %s cannot open %s; showing %s", role.value, feature.value, FALLBACK_FEATURE.value)
        return FALLBACK_FEATURE

    def default_feature(self, role: Role) -> Feature:
        features = self._table.get(role, ())
        return features[0] if features else FALLBACK_FEATURE
