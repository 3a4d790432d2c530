from portfolio.config import settings
from portfolio.core.security import is_valid_contact_email
from portfolio.modules.contact.schemas import ContactRequest
from fastapi import HTTPException
from typing import Dict
from urllib.parse import quote


def build_whatsapp_url(name: str, email: str, message: str) -> str:
    text = (
        f"New Contact Form Submission%0A%0A"
        f"*From:* {quote(name, safe='')}%0A"
        f"*Email:* {quote(email, safe='')}%0A"
        f"*Message:* {quote(message, safe='')}"
    )
    return f"https://wa.me/{settings.contact_whatsapp_number}?text={text}"


def handle_contact(request: ContactRequest) -> Dict[str, str]:
    """Validate the form and hand back a WhatsApp deep link carrying the message"""
    if not request.name or not request.email or not request.message:
        raise HTTPException(status_code=400, detail="Name, email, and message are required fields")
    if not is_valid_contact_email(request.email):
        raise HTTPException(status_code=400, detail="Please provide a valid email address")
    return {
        "message": "Preparing to send WhatsApp message...",
        "whatsappUrl": build_whatsapp_url(request.name, request.email, request.message),
    }
