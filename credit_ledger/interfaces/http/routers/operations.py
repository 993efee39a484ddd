"""Endpoint running a priced operation against the caller's balance."""
from fastapi import APIRouter, Depends, HTTPException, status

from credit_ledger.interfaces.http.deps import get_ledger_service
from credit_ledger.modules.ledger import (
    InsufficientBalanceError,
    LedgerService,
    UnknownOperationError,
    UnknownUserError,
)
from credit_ledger.modules.operations import InvalidOperandError, InvalidOperationTypeError, OperationParams
from credit_ledger.schemas import NewOperationRequest, NewOperationResponse

router = APIRouter()


@router.post("", response_model=NewOperationResponse, summary="Perform an operation and bill it")
async def new_operation(
    payload: NewOperationRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> NewOperationResponse:
    params = OperationParams(num1=payload.operation_params.num1, num2=payload.operation_params.num2)
    try:
        receipt = await ledger.perform_operation(
            user_id=payload.user_id,
            operation_type=payload.operation_type,
            params=params,
        )
    except (UnknownUserError, UnknownOperationError, InvalidOperationTypeError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except InsufficientBalanceError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    except InvalidOperandError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid operation: {exc}",
        ) from exc

    return NewOperationResponse(
        result=receipt.result,
        new_balance=receipt.new_balance,
        record_id=receipt.record_id,
    )
