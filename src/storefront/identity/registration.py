"""Account registration: command, handler and service."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.passwords import hash_password
from storefront.identity.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 6


@storefront.command(part_of="User")
class RegisterUser:
    username = String(required=True, min_length=3, max_length=50)
    password_hash = String(required=True, max_length=255)
    is_admin = Boolean(default=False)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.by_username(command.username):
            raise ValidationError({"username": ["Username already exists"]})

        user = User.register(
            username=command.username,
            password_hash=command.password_hash,
            is_admin=command.is_admin,
        )
        repo.add(user)

        logger.info("user_registered", user_id=str(user.id), is_admin=user.is_admin)
        return str(user.id)


def register_user(username, password, is_admin=False):
    """Hash the password and register the account. Returns the new user id."""
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError({"password": [f"Password must be at least {MIN_PASSWORD_LENGTH} characters"]})

    return current_domain.process(
        RegisterUser(username=username, password_hash=hash_password(password), is_admin=is_admin),
        asynchronous=False,
    )
