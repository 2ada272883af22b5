"""
FastAPI dependencies.
Wires the shared Supabase client, the acting user and the repositories
into route handlers.
"""

import datetime
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from supabase import AsyncClient

from opsdesk.config import Settings, get_settings
from opsdesk.domain.models.base import ValidationError
from opsdesk.domain.repositories.base import ListFilters
from opsdesk.domain.services.auth_service import SessionProvider, StaticSessionProvider
from opsdesk.infrastructure.auth.jwt_handler import JWTHandler
from opsdesk.infrastructure.repositories import (
    SupabaseClientRepository,
    SupabaseCredentialRepository,
    SupabaseIncomeRepository,
    SupabaseExpenseRepository,
    SupabaseRenewalRepository,
    SupabaseDashboardRepository,
)


# Anonymous requests are allowed; rows are then written without an owner
security = HTTPBearer(auto_error=False)


def get_jwt_handler(settings: Annotated[Settings, Depends(get_settings)]) -> JWTHandler:
    """Dependency to get JWT handler."""
    return JWTHandler(settings)


def get_supabase(request: Request) -> AsyncClient:
    """Dependency to get the Supabase client created at startup."""
    return request.app.state.supabase


async def get_current_user_id(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)]
) -> Optional[str]:
    """
    User id from the bearer token, or None when no token is sent.

    Raises:
        HTTPException: 401 if a token is sent but does not verify
    """
    if credentials is None:
        return None

    try:
        return jwt_handler.get_user_id(credentials.credentials)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_session_provider(
    user_id: Annotated[Optional[str], Depends(get_current_user_id)]
) -> SessionProvider:
    """Session provider pinned to the request's user."""
    return StaticSessionProvider(user_id)


def get_list_filters(
    search: Optional[str] = Query(None, description="Case-insensitive substring on the display name"),
    date_from: Optional[datetime.date] = Query(None, description="Inclusive lower date bound"),
    date_to: Optional[datetime.date] = Query(None, description="Inclusive upper date bound"),
    owner_id: Optional[str] = Query(None, description="Only rows owned by this user"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum rows to return"),
) -> ListFilters:
    """Common list query parameters."""
    return ListFilters(
        search=search,
        date_from=date_from,
        date_to=date_to,
        owner_id=owner_id,
        limit=limit,
    )


def get_client_repository(
    client: Annotated[AsyncClient, Depends(get_supabase)],
    session_provider: Annotated[SessionProvider, Depends(get_session_provider)],
    settings: Annotated[Settings, Depends(get_settings)]
) -> SupabaseClientRepository:
    """Dependency to get client repository."""
    return SupabaseClientRepository(client, session_provider, settings)


def get_credential_repository(
    client: Annotated[AsyncClient, Depends(get_supabase)],
    session_provider: Annotated[SessionProvider, Depends(get_session_provider)],
    settings: Annotated[Settings, Depends(get_settings)]
) -> SupabaseCredentialRepository:
    """Dependency to get credential repository."""
    return SupabaseCredentialRepository(client, session_provider, settings)


def get_income_repository(
    client: Annotated[AsyncClient, Depends(get_supabase)],
    session_provider: Annotated[SessionProvider, Depends(get_session_provider)],
    settings: Annotated[Settings, Depends(get_settings)]
) -> SupabaseIncomeRepository:
    """Dependency to get income repository."""
    return SupabaseIncomeRepository(client, session_provider, settings)


def get_expense_repository(
    client: Annotated[AsyncClient, Depends(get_supabase)],
    session_provider: Annotated[SessionProvider, Depends(get_session_provider)],
    settings: Annotated[Settings, Depends(get_settings)]
) -> SupabaseExpenseRepository:
    """Dependency to get expense repository."""
    return SupabaseExpenseRepository(client, session_provider, settings)


def get_renewal_repository(
    client: Annotated[AsyncClient, Depends(get_supabase)]
) -> SupabaseRenewalRepository:
    """Dependency to get renewal repository."""
    return SupabaseRenewalRepository(client)


def get_dashboard_repository(
    client: Annotated[AsyncClient, Depends(get_supabase)],
    settings: Annotated[Settings, Depends(get_settings)]
) -> SupabaseDashboardRepository:
    """Dependency to get dashboard loader."""
    return SupabaseDashboardRepository(client, settings)
