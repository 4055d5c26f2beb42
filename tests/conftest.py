import pytest

from accessroute.core_route_service import AccessibilityRouteService
from accessroute.knowledge_base import AccessibilityKnowledgeBase
from accessroute.models.accessibility import AccessibilityPreferences


@pytest.fixture
def knowledge_base():
    return AccessibilityKnowledgeBase()


@pytest.fixture
def route_service():
    # Bounded so a blocked destination fails fast instead of flooding the lattice
    return AccessibilityRouteService(max_expansions=2000)


@pytest.fixture
def wheelchair():
    return AccessibilityPreferences(requires_wheelchair_access=True)
