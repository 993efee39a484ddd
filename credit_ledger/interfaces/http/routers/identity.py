"""Identity provider hooks.

The post-confirmation hook provisions the ledger user and always hands the
event back unchanged; provisioning is best-effort and never blocks sign-up.
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from credit_ledger.interfaces.http.deps import get_user_service
from credit_ledger.modules.users import UserService

logger = logging.getLogger(__name__)

router = APIRouter()

CONFIRM_SIGN_UP_TRIGGER = "PostConfirmation_ConfirmSignUp"


async def handle_post_confirmation(event: dict[str, Any], service: UserService) -> dict[str, Any]:
    logger.info("Post-confirmation hook called with trigger %s", event.get("triggerSource"))

    if event.get("triggerSource") == CONFIRM_SIGN_UP_TRIGGER:
        attributes = (event.get("request") or {}).get("userAttributes") or {}
        try:
            await service.create_user(attributes)
        except Exception:
            logger.exception("Error in post-confirmation handler")

    return event


@router.post("/post-confirmation", summary="Identity provider post-confirmation hook")
async def post_confirmation(
    event: dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
) -> dict[str, Any]:
    return await handle_post_confirmation(event, service)
