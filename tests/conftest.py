import pytest
from sqlalchemy.pool import StaticPool

import helpdesk.infrastructure.database.models  # noqa: F401
from helpdesk.config.settings import Settings
from helpdesk.entities.user import AuthContext, Role
from helpdesk.infrastructure.database import session as db
from helpdesk.infrastructure.database.base_model import BaseModel
from helpdesk.infrastructure.security.jwt_provider import JwtProvider
from helpdesk.infrastructure.security.password_hasher import PasswordHasher
from helpdesk.main import create_app
from helpdesk.repositories.refresh_token_repository import RefreshTokenRepository
from helpdesk.repositories.user_repository import UserRepository
from helpdesk.services.auth_service import AuthService
from helpdesk.services.refresh_token_service import RefreshTokenService
from helpdesk.services.user_service import UserService

TEST_SECRET = "test-signing-secret-0123456789abcdef"
PASSWORD = "correct-horse-battery"


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    monkeypatch.setattr(PasswordHasher, "DEFAULT_ITERATIONS", 1_000)


@pytest.fixture
def engine():
    engine = db.init_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    BaseModel.metadata.create_all(engine)
    yield engine
    BaseModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def jwt_provider():
    return JwtProvider(TEST_SECRET)


@pytest.fixture
def make_auth_service(jwt_provider):
    def _make(session, *, revoke_lineage_on_reuse: bool = False) -> AuthService:
        refresh_tokens = RefreshTokenService(
            repo=RefreshTokenRepository(session),
            ttl_days=7,
            revoke_lineage_on_reuse=revoke_lineage_on_reuse,
        )
        return AuthService(
            user_repository=UserRepository(session),
            refresh_tokens=refresh_tokens,
            jwt_provider=jwt_provider,
        )

    return _make


@pytest.fixture
def register_user(engine):
    def _register(email: str, *, password: str = PASSWORD, role: Role | None = None) -> AuthContext:
        with db.db_session() as s:
            user = UserService(UserRepository(s)).register(email=email, password=password, role=role)
            return AuthContext(subject_id=user.id, role=Role(user.role))

    return _register


@pytest.fixture
def app(engine, jwt_provider):
    settings = Settings(_env_file=None, jwt_secret=TEST_SECRET, api_prefix="/api", debug=False)
    app = create_app(settings, jwt_provider=jwt_provider)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def bearer(jwt_provider):
    def _bearer(auth: AuthContext) -> dict:
        token = jwt_provider.issue_access_token(user_id=auth.subject_id, role=auth.role).token
        return {"Authorization": f"Bearer {token}"}

    return _bearer
