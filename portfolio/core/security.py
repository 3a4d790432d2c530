"""
Input validation helpers shared by the content, account and upload endpoints
"""

import os
import re
from typing import List, Optional

from fastapi import HTTPException

CONTACT_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
ACCOUNT_EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)
PASSWORD_SPECIAL_CHARS = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")

DISPOSABLE_EMAIL_DOMAINS = {
    "10minutemail.com", "guerrillamail.com", "mailinator.com", "temp-mail.org",
    "sharklasers.com", "trashmail.com", "yopmail.com", "tempmail.com",
}

XSS_PATTERNS = [
    re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"<[^>]*\son\w+\s*=", re.IGNORECASE),
    re.compile(r"<iframe", re.IGNORECASE),
    re.compile(r"<object", re.IGNORECASE),
    re.compile(r"<embed", re.IGNORECASE),
]

ALLOWED_IMAGE_TYPES = [
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
]
ALLOWED_DOCUMENT_TYPES = [
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "text/plain",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
]
ALLOWED_FILE_TYPES = ALLOWED_IMAGE_TYPES + ALLOWED_DOCUMENT_TYPES

SUSPICIOUS_EXTENSIONS = (
    ".exe", ".bat", ".cmd", ".com", ".pif", ".scr", ".vbs", ".js", ".jse",
    ".wsf", ".wsh", ".msc", ".msp", ".mst", ".vbe", ".scf", ".lnk", ".hta",
    ".cpl", ".msi", ".dll", ".so", ".sh",
)

BLOCKED_USER_AGENTS = ("sqlmap", "nmap", "nessus", "nikto", "masscan")


def is_valid_contact_email(email: str) -> bool:
    return bool(email) and CONTACT_EMAIL_PATTERN.match(email) is not None


def validate_account_email(email: str) -> Optional[str]:
    """Return an error message for an unacceptable account email, None when it is fine."""
    if not email or not ACCOUNT_EMAIL_PATTERN.match(email) or "@" not in email:
        return "Invalid email format"
    domain = email.split("@", 1)[1].lower()
    if domain in DISPOSABLE_EMAIL_DOMAINS:
        return "Disposable email addresses are not allowed"
    return None


def validate_password_strength(password: str) -> List[str]:
    errors = []
    if len(password or "") < 8:
        errors.append("Password must be at least 8 characters long")
        return errors
    if not (
        re.search(r"[A-Z]", password)
        and re.search(r"[a-z]", password)
        and re.search(r"\d", password)
        and PASSWORD_SPECIAL_CHARS.search(password)
    ):
        errors.append(
            "Password must contain at least one uppercase letter, one lowercase letter, "
            "one number, and one special character"
        )
    return errors


def contains_xss(value: str) -> bool:
    if not isinstance(value, str):
        return False
    return any(p.search(value) for p in XSS_PATTERNS)


def ensure_no_xss(*values) -> None:
    for value in values:
        if contains_xss(value):
            raise HTTPException(status_code=400, detail="Input contains potentially unsafe content")


def is_path_traversal(path: str) -> bool:
    if not path:
        return False
    return "../" in path or "..\\" in path or path.strip("/") == ".." or path.endswith("/..")


def sanitize_filename(filename: str) -> str:
    if not filename or not isinstance(filename, str):
        return ""
    sanitized = filename.replace("../", "").replace("..\\", "").replace("/./", "").replace("\\./", "")
    return re.sub(r"[^a-zA-Z0-9._-]", "_", sanitized)


def has_suspicious_extension(filename: str) -> bool:
    return (filename or "").lower().endswith(SUSPICIOUS_EXTENSIONS)


def file_extension(filename: str, default: str = "") -> str:
    ext = os.path.splitext(filename or "")[1].lstrip(".").lower()
    return ext or default


def validate_upload(
    filename: str,
    content_type: Optional[str],
    size: int,
    allowed_types: List[str] = ALLOWED_FILE_TYPES,
    max_size_mb: int = 5,
) -> None:
    """Raise 400 when the upload is not an accepted type, too large or looks executable."""
    if not filename:
        raise HTTPException(status_code=400, detail="No file provided")
    if (content_type or "").lower() not in allowed_types:
        raise HTTPException(
            status_code=400,
            detail=f"File type {content_type or 'unknown'} is not allowed",
        )
    if size > max_size_mb * 1024 * 1024:
        raise HTTPException(status_code=400, detail=f"File size exceeds {max_size_mb}MB limit")
    if has_suspicious_extension(filename):
        raise HTTPException(status_code=400, detail="File has a suspicious extension")


def slugify_gallery_category(category: str) -> str:
    """Lowercase, spaces to dashes, keep [a-z0-9-] only."""
    slug = re.sub(r"\s+", "-", (category or "").strip().lower())
    return re.sub(r"[^a-z0-9-]", "", slug)


def sanitize_document_category(category: Optional[str]) -> str:
    if not category or not category.strip():
        return "uncategorized"
    return re.sub(r"[^a-zA-Z0-9_-]", "_", category.strip()).lower()


def slugify_album(name: str) -> str:
    return re.sub(r"\s+", "-", (name or "").strip().lower())
