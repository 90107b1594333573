"""
HTTP errors and alert headers for the REST layer

Every 400 raised by a resource names the entity and an error key
(idexists, idnull, idinvalid, idnotfound) so clients can react without
parsing the message.
"""
from typing import Dict, Optional

from fastapi import HTTPException, status

from .config import settings


def alert_headers(app_name: str, message: str, param: str) -> Dict[str, str]:
    return {
        f"X-{app_name}-alert": message,
        f"X-{app_name}-params": param,
    }


def entity_creation_headers(entity_name: str, entity_id) -> Dict[str, str]:
    return alert_headers(
        settings.APP_NAME,
        f"A new {entity_name} is created with identifier {entity_id}",
        str(entity_id),
    )


def entity_update_headers(entity_name: str, entity_id) -> Dict[str, str]:
    return alert_headers(
        settings.APP_NAME,
        f"A {entity_name} is updated with identifier {entity_id}",
        str(entity_id),
    )


def entity_deletion_headers(entity_name: str, entity_id) -> Dict[str, str]:
    return alert_headers(
        settings.APP_NAME,
        f"A {entity_name} is deleted with identifier {entity_id}",
        str(entity_id),
    )


class BadRequestAlertException(HTTPException):
    """400 response carrying the entity name and a machine-readable error key"""

    def __init__(self, message: str, entity_name: str, error_key: str, headers: Optional[Dict[str, str]] = None):
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key

        error_headers = {
            f"X-{settings.APP_NAME}-error": f"error.{error_key}",
            f"X-{settings.APP_NAME}-params": entity_name,
        }
        if headers:
            error_headers.update(headers)

        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": message,
                "entityName": entity_name,
                "errorKey": error_key,
            },
            headers=error_headers,
        )


class IdentifierMismatch(BadRequestAlertException):
    """Path id and body id disagree"""

    def __init__(self, entity_name: str):
        super().__init__("Invalid ID", entity_name, "idinvalid")


class NotFound(HTTPException):
    """No record with the requested id"""

    def __init__(self, entity_name: str, entity_id):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{entity_name} {entity_id} not found",
        )
