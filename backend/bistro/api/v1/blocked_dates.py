"""Blocked date endpoints."""

from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, HTTPException, status

from bistro.api.deps import AdminDep, SessionDep
from bistro.schemas.blocked_date import BlockedDateCreate, BlockedDateRead
from bistro.services import blocked_date_service

router = APIRouter(prefix="/blocked-dates")


@router.get("", response_model=list[BlockedDateRead], summary="List blocked dates")
async def list_blocked_dates(
    session: SessionDep,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[BlockedDateRead]:
    rows = await blocked_date_service.list_blocked_dates(
        session, start_date=start_date, end_date=end_date
    )
    return [BlockedDateRead.model_validate(row) for row in rows]


@router.post(
    "",
    response_model=BlockedDateRead,
    status_code=status.HTTP_201_CREATED,
    summary="Block a date",
)
async def create_blocked_date(
    payload: BlockedDateCreate, session: SessionDep, _: AdminDep
) -> BlockedDateRead:
    try:
        blocked = await blocked_date_service.create_blocked_date(session, payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return BlockedDateRead.model_validate(blocked)


@router.delete(
    "/{blocked_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Unblock a date"
)
async def delete_blocked_date(blocked_id: uuid.UUID, session: SessionDep, _: AdminDep) -> None:
    blocked = await blocked_date_service.get_blocked_date(session, blocked_id)
    if blocked is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blocked date not found")
    await blocked_date_service.delete_blocked_date(session, blocked=blocked)
