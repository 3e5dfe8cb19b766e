"""Named RPC endpoint kept for clients that probe one date at a time."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from bistro.api.rate_limit import DEFAULT_RATE_DEP
from bistro.api.v1.availability import fetch_unavailable
from bistro.availability import AvailabilityFetchError
from bistro.schemas.availability import RpcRequest, RpcResponse
from bistro.services import availability_service

router = APIRouter(prefix="/rpc")


@router.post(
    "/{name}",
    response_model=RpcResponse,
    summary="Call a named database function",
    dependencies=[DEFAULT_RATE_DEP],
)
async def call_rpc(name: str, payload: RpcRequest | None = None) -> RpcResponse:
    args = payload.args if payload is not None else {}
    try:
        result = await availability_service.call_rpc(name, args)
    except availability_service.UnknownRpcError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown function: {name}"
        ) from exc
    except AvailabilityFetchError as exc:
        raise fetch_unavailable() from exc
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return RpcResponse(name=name, result=result)
