"""
Security event logging.

Events go through the dedicated ``security`` logger so deployments can route
them separately from application logs. Each record carries the event type,
user and client address as ``extra`` fields.
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger("security")


def log_security_event(
    event_type: str,
    details: Any = None,
    user_id: Optional[str] = None,
    ip_address: Optional[str] = None,
    level: int = logging.INFO,
) -> Dict[str, Any]:
    if isinstance(details, str):
        details = {"message": details}
    entry = {
        "event_type": event_type,
        "user_id": str(user_id) if user_id is not None else "anonymous",
        "ip_address": ip_address or "unknown",
        "details": details or {},
    }
    logger.log(level, "[SECURITY EVENT] %s user=%s ip=%s details=%s",
               event_type, entry["user_id"], entry["ip_address"], entry["details"],
               extra={"security_event": entry})
    return entry


def log_auth_event(event_type: str, user_id: Optional[str], ip_address: Optional[str], details: Any = None):
    """event_type is one of login_success, login_failure, logout, password_change, email_change."""
    if "success" in event_type:
        result = "success"
    elif "failure" in event_type:
        result = "failure"
    else:
        result = "other"
    level = logging.WARNING if result == "failure" else logging.INFO
    return log_security_event(
        f"auth_{event_type}",
        {"result": result, "details": details},
        user_id,
        ip_address,
        level,
    )


def log_suspicious_activity(activity_type: str, user_id: Optional[str], ip_address: Optional[str], details: Any = None):
    return log_security_event(
        "suspicious_activity",
        {"activity_type": activity_type, "details": details},
        user_id,
        ip_address,
        logging.WARNING,
    )


def log_access_violation(user_id: Optional[str], requested_path: str, role: Optional[str], ip_address: Optional[str]):
    return log_security_event(
        "access_violation",
        {"requested_path": requested_path, "user_role": role},
        user_id,
        ip_address,
        logging.WARNING,
    )


def log_data_access(user_id: Optional[str], action: str, resource_type: str, resource_id: Optional[str] = None,
                    ip_address: Optional[str] = None):
    return log_security_event(
        "data_access",
        {"action": action, "resource_type": resource_type, "resource_id": resource_id or "unknown"},
        user_id,
        ip_address,
    )
