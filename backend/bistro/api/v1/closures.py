"""Weekly closing day and closure period endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, HTTPException, status

from bistro.api.deps import AdminDep, SessionDep
from bistro.models.closure import PeriodClosure, RecurringClosedDay
from bistro.schemas.closure import (
    PeriodClosureCreate,
    PeriodClosureRead,
    PeriodClosureUpdate,
    RecurringClosedDayCreate,
    RecurringClosedDayRead,
    RecurringClosedDayUpdate,
)
from bistro.services import closure_service

router = APIRouter()


async def _get_recurring_or_404(session: SessionDep, recurring_id: uuid.UUID) -> RecurringClosedDay:
    rule = await closure_service.get_recurring(session, recurring_id)
    if rule is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Closed day not found")
    return rule


async def _get_period_or_404(session: SessionDep, period_id: uuid.UUID) -> PeriodClosure:
    period = await closure_service.get_period(session, period_id)
    if period is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Closure period not found")
    return period


@router.get(
    "/recurring-closed-days",
    response_model=list[RecurringClosedDayRead],
    summary="List weekly closing days",
)
async def list_recurring_closed_days(session: SessionDep) -> list[RecurringClosedDayRead]:
    rules = await closure_service.list_recurring(session)
    return [RecurringClosedDayRead.model_validate(rule) for rule in rules]


@router.post(
    "/recurring-closed-days",
    response_model=RecurringClosedDayRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add a weekly closing day",
)
async def create_recurring_closed_day(
    payload: RecurringClosedDayCreate, session: SessionDep, _: AdminDep
) -> RecurringClosedDayRead:
    rule = await closure_service.create_recurring(session, payload)
    return RecurringClosedDayRead.model_validate(rule)


@router.patch(
    "/recurring-closed-days/{recurring_id}",
    response_model=RecurringClosedDayRead,
    summary="Edit or toggle a weekly closing day",
)
async def update_recurring_closed_day(
    recurring_id: uuid.UUID,
    payload: RecurringClosedDayUpdate,
    session: SessionDep,
    _: AdminDep,
) -> RecurringClosedDayRead:
    rule = await _get_recurring_or_404(session, recurring_id)
    try:
        rule = await closure_service.update_recurring(session, rule=rule, payload=payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return RecurringClosedDayRead.model_validate(rule)


@router.delete(
    "/recurring-closed-days/{recurring_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a weekly closing day",
)
async def delete_recurring_closed_day(
    recurring_id: uuid.UUID, session: SessionDep, _: AdminDep
) -> None:
    rule = await _get_recurring_or_404(session, recurring_id)
    await closure_service.delete_recurring(session, rule=rule)


@router.get(
    "/period-closures",
    response_model=list[PeriodClosureRead],
    summary="List closure periods",
)
async def list_period_closures(session: SessionDep) -> list[PeriodClosureRead]:
    periods = await closure_service.list_periods(session)
    return [PeriodClosureRead.model_validate(period) for period in periods]


@router.post(
    "/period-closures",
    response_model=PeriodClosureRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add a closure period",
)
async def create_period_closure(
    payload: PeriodClosureCreate, session: SessionDep, _: AdminDep
) -> PeriodClosureRead:
    period = await closure_service.create_period(session, payload)
    return PeriodClosureRead.model_validate(period)


@router.patch(
    "/period-closures/{period_id}",
    response_model=PeriodClosureRead,
    summary="Edit or toggle a closure period",
)
async def update_period_closure(
    period_id: uuid.UUID,
    payload: PeriodClosureUpdate,
    session: SessionDep,
    _: AdminDep,
) -> PeriodClosureRead:
    period = await _get_period_or_404(session, period_id)
    try:
        period = await closure_service.update_period(session, period=period, payload=payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return PeriodClosureRead.model_validate(period)


@router.delete(
    "/period-closures/{period_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a closure period",
)
async def delete_period_closure(period_id: uuid.UUID, session: SessionDep, _: AdminDep) -> None:
    period = await _get_period_or_404(session, period_id)
    await closure_service.delete_period(session, period=period)
