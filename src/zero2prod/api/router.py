"""API endpoints for the newsletter service."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, HTTPException, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from zero2prod import dependencies
from zero2prod.api.schemas import SubscriptionForm
from zero2prod.db.models import Subscription

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health_check")
async def health_check() -> Response:
    """Liveness probe: 200 with an empty body."""
    return Response(status_code=200)


@router.post("/subscriptions")
async def subscribe(
    form: Annotated[SubscriptionForm, Form()],
    db: AsyncSession = Depends(dependencies.get_db_session),
) -> Response:
    """
    Register a new newsletter subscriber.

    Args:
        form: URL-encoded form carrying `name` and `email`
        db: Database session dependency

    Returns:
        Empty 200 response once the subscription is stored

    Raises:
        HTTPException: 500 if the subscription cannot be stored (including a
            duplicate email)
    """
    subscription = Subscription(email=form.email, name=form.name)
    try:
        db.add(subscription)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("Failed to store subscription for %s", form.email, exc_info=True)
        raise HTTPException(
            status_code=500,
            detail="Failed to store subscription",
        ) from e

    logger.info("New subscriber %s saved (id=%s)", form.email, subscription.id)
    return Response(status_code=200)
