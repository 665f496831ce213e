"""Login, logout and session resolution."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.errors import AuthenticationRequiredError
from storefront.identity.session import UserSession
from storefront.identity.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="UserSession")
class StartSession:
    user_id = Identifier(required=True)


@storefront.command(part_of="UserSession")
class EndSession:
    token = String(required=True, max_length=128)


@storefront.command_handler(part_of=UserSession)
class SessionHandler:
    @handle(StartSession)
    def start_session(self, command):
        session = UserSession.open(user_id=command.user_id)
        current_domain.repository_for(UserSession).add(session)
        return session.token

    @handle(EndSession)
    def end_session(self, command):
        repo = current_domain.repository_for(UserSession)
        session = repo.by_token(command.token)
        if session is None:
            return
        repo._dao.delete(session)
        logger.info("session_ended", user_id=str(session.user_id))


def login(username, password) -> tuple[User, str]:
    """Check credentials and open a session. Returns the user and the session token."""
    user = current_domain.repository_for(User).by_username(username)
    if user is None or not user.check_password(password or ""):
        logger.info("login_failed", username=username)
        raise AuthenticationRequiredError("Invalid username or password")

    token = current_domain.process(StartSession(user_id=user.id), asynchronous=False)
    logger.info("login_succeeded", user_id=str(user.id))
    return user, token


def logout(token) -> None:
    """End the session behind ``token``; unknown or missing tokens are ignored."""
    if not token:
        return
    current_domain.process(EndSession(token=token), asynchronous=False)


def resolve_user(token) -> User | None:
    """Return the user owning ``token``, or None when the token is unknown."""
    session = current_domain.repository_for(UserSession).by_token(token)
    if session is None:
        return None
    try:
        return current_domain.repository_for(User).get(session.user_id)
    except ObjectNotFoundError:
        return None
