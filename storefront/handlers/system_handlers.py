# storefront/handlers/system_handlers.py
import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from ..exceptions import ContactDeliveryFailed
from ..models.contact import ContactMessage
from ..services.notification_service import NotificationService
from .base_handler import get_database, get_notification_service, success

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])

@router.get("/health")
async def health_check(db=Depends(get_database)) -> JSONResponse:
    """Service and database status"""
    health_status = {
        'status': 'healthy',
        'time': datetime.now(timezone.utc).isoformat(),
        'services': {}
    }

    try:
        await db.ping()
        health_status['services']['database'] = 'healthy'
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        health_status['services']['database'] = f'unhealthy: {e}'
        health_status['status'] = 'degraded'

    status_code = 200 if health_status['status'] == 'healthy' else 503
    return JSONResponse(status_code=status_code, content=health_status)

@router.post("/contact-form")
async def contact_form(contact: ContactMessage,
                       notifications: NotificationService = Depends(get_notification_service)) -> dict:
    """Forward a storefront contact message to the shop admin"""
    if not await notifications.notify_contact(contact):
        raise ContactDeliveryFailed(f"Contact message from {contact.email!r} was not delivered")
    return success(message="Message sent successfully")
