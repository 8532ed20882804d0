"""Budowa serwisów aplikacji i dependencies FastAPI."""

from dataclasses import dataclass

from fastapi import Depends, Request
from sqlalchemy.orm import sessionmaker

from .auth import AuthContext, AuthGate, CredentialStore, SessionManager, SessionStore
from .config import Settings
from .services import DeletionGate, PaginatedLister, SignatureRepository


@dataclass
class Services:
    """Komponenty współdzielone przez wszystkie żądania."""

    settings: Settings
    sessions: SessionStore
    cookies: SessionManager
    credentials: CredentialStore
    gate: AuthGate
    signatures: SignatureRepository
    lister: PaginatedLister
    deletion: DeletionGate


def build_services(settings: Settings, session_factory: sessionmaker) -> Services:
    """Połącz komponenty raz, przy starcie aplikacji."""
    sessions = SessionStore(ttl_seconds=settings.session_ttl_seconds)
    cookies = SessionManager(
        settings.secret_key,
        cookie_name=settings.session_cookie_name,
        max_age=settings.session_ttl_seconds,
        secure=settings.cookie_secure,
    )
    credentials = CredentialStore(
        session_factory,
        timeout=settings.repository_timeout,
        rounds=settings.bcrypt_rounds,
    )
    gate = AuthGate(credentials, sessions, rolling=settings.session_rolling)
    signatures = SignatureRepository(session_factory, timeout=settings.repository_timeout)
    lister = PaginatedLister(
        signatures,
        base_url=settings.public_url,
        default_limit=settings.page_limit_default,
        max_limit=settings.page_limit_max,
    )
    return Services(
        settings=settings,
        sessions=sessions,
        cookies=cookies,
        credentials=credentials,
        gate=gate,
        signatures=signatures,
        lister=lister,
        deletion=DeletionGate(gate, signatures),
    )


def get_services(request: Request) -> Services:
    """Dependency - serwisy zapisane w ``app.state``."""
    return request.app.state.services


async def get_auth_context(
    request: Request,
    services: Services = Depends(get_services),
) -> AuthContext:
    """Dependency - sesja rozwiązana raz na początku żądania."""
    session_id = services.cookies.get_session_id(request)
    return await services.gate.resolve(session_id)
