from fastapi import APIRouter, Request
from portfolio.modules.contact.schemas import ContactRequest, ContactResponse
from portfolio.modules.contact.service import handle_contact
from portfolio.core.dependencies import client_ip
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contact"])


@router.post("/contact", response_model=ContactResponse)
async def contact(request: Request, body: ContactRequest):
    result = handle_contact(body)
    logger.info(f"Contact form submission from {client_ip(request)}")
    return result
