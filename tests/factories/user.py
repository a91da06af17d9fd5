from factory.declarations import LazyAttribute, Sequence

from db.models import User
from tests.factories.base import AsyncSQLAlchemyModelFactory, fake
from utils import hash_password

DEFAULT_PASSWORD = "correct horse battery staple"


class UserFactory(AsyncSQLAlchemyModelFactory[User]):
    class Meta:  # type: ignore
        model = User

    username = Sequence(lambda n: f"{fake.user_name()}{n}")
    password_hash = LazyAttribute(lambda obj: hash_password(DEFAULT_PASSWORD))
    display_name = LazyAttribute(lambda obj: fake.name())
