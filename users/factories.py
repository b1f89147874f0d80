from collections.abc import Callable

from cuid2 import cuid_wrapper
from model_bakery import baker

from users.models import Credential, User


cuid_generator: Callable[[], str] = cuid_wrapper()


DEFAULT_TEST_USER_PASSWORD = "123456"  # noqa: S105


class UserFactory:
    def create_user(self, **kwargs) -> User:
        try:
            return User.objects.get(email=kwargs.get("email", ""))
        except User.DoesNotExist:
            pass

        user = baker.prepare(
            User,
            email=kwargs.get("email", f"user{cuid_generator()}@example.com"),
            name=kwargs.get("name", "Test User"),
            time_zone=kwargs.get("time_zone", "UTC"),
        )
        user.set_password(kwargs.get("password", DEFAULT_TEST_USER_PASSWORD))
        user.save()
        return user


class CredentialFactory:
    def create_credential(self, user: User, type: str, **kwargs) -> Credential:  # noqa: A002
        return baker.make(Credential, user=user, type=type, key=kwargs.get("key", {}))
