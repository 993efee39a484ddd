"""Administrative balance endpoint."""
from fastapi import APIRouter, Depends, HTTPException, status

from credit_ledger.interfaces.http.deps import get_user_service
from credit_ledger.modules.users import UserNotFoundError, UserService
from credit_ledger.schemas import UpdateBalanceRequest, UpdateBalanceResponse

router = APIRouter()


@router.put("/balance", response_model=UpdateBalanceResponse, summary="Set a user's balance")
async def update_balance(
    payload: UpdateBalanceRequest,
    service: UserService = Depends(get_user_service),
) -> UpdateBalanceResponse:
    try:
        await service.update_user_balance(payload.user_id, payload.amount)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return UpdateBalanceResponse(message="Balance updated successfully", new_balance=payload.amount)
