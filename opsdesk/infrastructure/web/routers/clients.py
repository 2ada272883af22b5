"""
Client management router.
Handles CRUD operations for client resources.
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends, Response, status

from opsdesk.application.dto.client_dto import (
    CreateClientRequestDTO,
    UpdateClientRequestDTO,
    ClientResponseDTO,
)
from opsdesk.domain.repositories.base import ListFilters
from opsdesk.infrastructure.repositories import SupabaseClientRepository
from opsdesk.infrastructure.web.dependencies import get_client_repository, get_list_filters


router = APIRouter()

Repository = Annotated[SupabaseClientRepository, Depends(get_client_repository)]


@router.get("", response_model=List[ClientResponseDTO])
async def list_clients(
    repository: Repository,
    filters: Annotated[ListFilters, Depends(get_list_filters)]
):
    """
    List clients newest-first.

    - **search**: Substring of the client name
    - **date_from** / **date_to**: Creation date bounds
    - **owner_id**: Only clients of this user
    - **limit**: Row cap
    """
    clients = await repository.list(filters)
    return [ClientResponseDTO.from_domain(client) for client in clients]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ClientResponseDTO)
async def create_client(request: CreateClientRequestDTO, repository: Repository):
    """
    Create a new client.

    - **name**: Client name (required)
    - **company**, **designation**, **address**, **city**, **phone**, **email**
    - **tax_id**: Tax identification number (GSTIN)
    """
    client = await repository.create(request)
    return ClientResponseDTO.from_domain(client)


@router.get("/{client_id}", response_model=ClientResponseDTO)
async def get_client(client_id: str, repository: Repository):
    """Get a client by id."""
    client = await repository.get(client_id)
    return ClientResponseDTO.from_domain(client)


@router.patch("/{client_id}", response_model=ClientResponseDTO)
async def update_client(client_id: str, request: UpdateClientRequestDTO, repository: Repository):
    """Update the fields sent; everything else is left alone."""
    client = await repository.update(client_id, request)
    return ClientResponseDTO.from_domain(client)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(client_id: str, repository: Repository):
    """Delete a client. Deleting an unknown id also succeeds."""
    await repository.delete(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
