from tests.factories.summary import SummaryFactory
from tests.factories.user import DEFAULT_PASSWORD, UserFactory

__all__ = ["DEFAULT_PASSWORD", "SummaryFactory", "UserFactory"]
