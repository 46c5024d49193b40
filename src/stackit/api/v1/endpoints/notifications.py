# src/stackit/api/v1/endpoints/notifications.py
"""Notification endpoints for the StackIt API."""

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy import update
from sqlalchemy.orm import Session

from stackit.models import Notification, User
from stackit.schemas.common import MessageResponse, Pagination
from stackit.schemas.notification import NotificationListResponse, NotificationOut

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _get_own_notification_or_404(db: Session, notification_id: int, user: User) -> Notification:
    notification = db.query(Notification).filter(
        Notification.id == notification_id,
        Notification.recipient_id == user.id,
    ).first()
    if notification is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    return notification


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    current_user: CurrentUserDep,
    db: SessionDep,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    unread: bool = Query(False, description="Only unread notifications"),
) -> dict[str, object]:
    """List the caller's notifications, newest first."""
    query = db.query(Notification).filter(Notification.recipient_id == current_user.id)
    if unread:
        query = query.filter(Notification.is_read.is_(False))

    total = query.count()
    notifications = (
        query.order_by(Notification.created_at.desc(), Notification.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    unread_count = db.query(Notification).filter(
        Notification.recipient_id == current_user.id,
        Notification.is_read.is_(False),
    ).count()

    return {
        "notifications": notifications,
        "pagination": Pagination.build(page, limit, total),
        "unread_count": unread_count,
    }


@router.post("/mark-all-read", response_model=MessageResponse)
async def mark_all_read(current_user: CurrentUserDep, db: SessionDep) -> dict[str, str]:
    """Mark every unread notification of the caller as read."""
    db.execute(
        update(Notification)
        .where(Notification.recipient_id == current_user.id, Notification.is_read.is_(False))
        .values(is_read=True)
    )
    db.commit()
    return {"message": "All notifications marked as read"}


@router.patch("/{notification_id}", response_model=NotificationOut)
async def mark_read(
    notification_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Notification:
    """Mark one notification as read."""
    notification = _get_own_notification_or_404(db, notification_id, current_user)
    notification.is_read = True
    db.commit()
    db.refresh(notification)
    return notification


@router.delete("/{notification_id}", response_model=MessageResponse)
async def delete_notification(
    notification_id: int,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> dict[str, str]:
    """Delete one of the caller's notifications."""
    notification = _get_own_notification_or_404(db, notification_id, current_user)
    db.delete(notification)
    db.commit()
    return {"message": "Notification deleted"}
