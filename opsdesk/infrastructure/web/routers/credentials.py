"""
Credential vault router.
Handles CRUD operations for service credentials.
"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from opsdesk.application.dto.credential_dto import (
    CreateCredentialRequestDTO,
    UpdateCredentialRequestDTO,
    CredentialResponseDTO,
)
from opsdesk.config import Settings, get_settings
from opsdesk.domain.repositories.base import ListFilters
from opsdesk.infrastructure.repositories import SupabaseCredentialRepository
from opsdesk.infrastructure.web.dependencies import get_credential_repository, get_list_filters


router = APIRouter()

Repository = Annotated[SupabaseCredentialRepository, Depends(get_credential_repository)]


class CredentialView:
    """How credential responses are rendered for this request."""

    def __init__(self, reveal: bool, settings: Settings):
        self.reveal = reveal
        self.critical_days = settings.renewal_critical_days
        self.warning_days = settings.renewal_window_days

    def render(self, credential) -> CredentialResponseDTO:
        return CredentialResponseDTO.from_domain(
            credential,
            reveal_secret=self.reveal,
            critical_days=self.critical_days,
            warning_days=self.warning_days,
        )


def get_credential_view(
    settings: Annotated[Settings, Depends(get_settings)],
    reveal: bool = Query(False, description="Return passwords unmasked")
) -> CredentialView:
    return CredentialView(reveal or settings.reveal_secrets, settings)


@router.get("", response_model=List[CredentialResponseDTO])
async def list_credentials(
    repository: Repository,
    filters: Annotated[ListFilters, Depends(get_list_filters)],
    view: Annotated[CredentialView, Depends(get_credential_view)],
    category: Optional[str] = Query(None, description="Domain, Hosting, Email or Other"),
):
    """
    List credentials newest-first.

    - **search**: Substring of the client name
    - **date_from** / **date_to**: Expiry date bounds
    - **category**: Credential type
    """
    filters.category = category
    credentials = await repository.list(filters)
    return [view.render(c) for c in credentials]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CredentialResponseDTO)
async def create_credential(
    request: CreateCredentialRequestDTO,
    repository: Repository,
    view: Annotated[CredentialView, Depends(get_credential_view)],
):
    """
    Create a credential.

    - **type**: Domain, Hosting, Email or Other (required)
    - **expiry**: Renewal date, used by the renewals view
    """
    credential = await repository.create(request)
    return view.render(credential)


@router.get("/{credential_id}", response_model=CredentialResponseDTO)
async def get_credential(
    credential_id: str,
    repository: Repository,
    view: Annotated[CredentialView, Depends(get_credential_view)],
):
    """Get a credential by id."""
    credential = await repository.get(credential_id)
    return view.render(credential)


@router.patch("/{credential_id}", response_model=CredentialResponseDTO)
async def update_credential(
    credential_id: str,
    request: UpdateCredentialRequestDTO,
    repository: Repository,
    view: Annotated[CredentialView, Depends(get_credential_view)],
):
    """Update the fields sent; a new type is validated like on create."""
    credential = await repository.update(credential_id, request)
    return view.render(credential)


@router.delete("/{credential_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_credential(credential_id: str, repository: Repository):
    """Delete a credential. Deleting an unknown id also succeeds."""
    await repository.delete(credential_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
