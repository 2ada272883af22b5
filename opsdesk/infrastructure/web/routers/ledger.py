"""
Income and expense routers.
Both ledgers share one shape; expenses add a category.
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends, Response, status

from opsdesk.application.dto.ledger_dto import (
    CreateIncomeRequestDTO,
    UpdateIncomeRequestDTO,
    IncomeResponseDTO,
    CreateExpenseRequestDTO,
    UpdateExpenseRequestDTO,
    ExpenseResponseDTO,
)
from opsdesk.domain.repositories.base import ListFilters
from opsdesk.infrastructure.repositories import SupabaseIncomeRepository, SupabaseExpenseRepository
from opsdesk.infrastructure.web.dependencies import (
    get_income_repository,
    get_expense_repository,
    get_list_filters,
)


incomes_router = APIRouter()
expenses_router = APIRouter()

IncomeRepository = Annotated[SupabaseIncomeRepository, Depends(get_income_repository)]
ExpenseRepository = Annotated[SupabaseExpenseRepository, Depends(get_expense_repository)]
Filters = Annotated[ListFilters, Depends(get_list_filters)]


@incomes_router.get("", response_model=List[IncomeResponseDTO])
async def list_incomes(repository: IncomeRepository, filters: Filters):
    """List incomes by date, newest first. Search matches the customer name."""
    incomes = await repository.list(filters)
    return [IncomeResponseDTO.from_domain(income) for income in incomes]


@incomes_router.post("", status_code=status.HTTP_201_CREATED, response_model=IncomeResponseDTO)
async def create_income(request: CreateIncomeRequestDTO, repository: IncomeRepository):
    """
    Record an income.

    - **amount**: Number or numeric string; commas are ignored
    - **remark**: Free text; remarks containing "pending" count as pending
    """
    income = await repository.create(request)
    return IncomeResponseDTO.from_domain(income)


@incomes_router.get("/{income_id}", response_model=IncomeResponseDTO)
async def get_income(income_id: str, repository: IncomeRepository):
    income = await repository.get(income_id)
    return IncomeResponseDTO.from_domain(income)


@incomes_router.patch("/{income_id}", response_model=IncomeResponseDTO)
async def update_income(income_id: str, request: UpdateIncomeRequestDTO, repository: IncomeRepository):
    income = await repository.update(income_id, request)
    return IncomeResponseDTO.from_domain(income)


@incomes_router.delete("/{income_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_income(income_id: str, repository: IncomeRepository):
    await repository.delete(income_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@expenses_router.get("", response_model=List[ExpenseResponseDTO])
async def list_expenses(repository: ExpenseRepository, filters: Filters):
    """List expenses by date, newest first. Search matches the payee name."""
    expenses = await repository.list(filters)
    return [ExpenseResponseDTO.from_domain(expense) for expense in expenses]


@expenses_router.post("", status_code=status.HTTP_201_CREATED, response_model=ExpenseResponseDTO)
async def create_expense(request: CreateExpenseRequestDTO, repository: ExpenseRepository):
    """Record an expense."""
    expense = await repository.create(request)
    return ExpenseResponseDTO.from_domain(expense)


@expenses_router.get("/{expense_id}", response_model=ExpenseResponseDTO)
async def get_expense(expense_id: str, repository: ExpenseRepository):
    expense = await repository.get(expense_id)
    return ExpenseResponseDTO.from_domain(expense)


@expenses_router.patch("/{expense_id}", response_model=ExpenseResponseDTO)
async def update_expense(expense_id: str, request: UpdateExpenseRequestDTO, repository: ExpenseRepository):
    expense = await repository.update(expense_id, request)
    return ExpenseResponseDTO.from_domain(expense)


@expenses_router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(expense_id: str, repository: ExpenseRepository):
    await repository.delete(expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
