"""
Shared CRUD resource for the entity endpoints

Every entity exposes the same six endpoints with the same identifier
rules: a new record must not carry an id, an update must carry the id of
an existing record matching the URL. build_crud_router wires them to one
service class.

Author: TM3
Date: 2025-11-28
"""
import logging
from typing import Optional, Tuple, Type

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from storefront.core.database import get_db
from storefront.core.errors import (
    BadRequestAlertException,
    IdentifierMismatch,
    NotFound,
    entity_creation_headers,
    entity_deletion_headers,
    entity_update_headers,
)
from storefront.domain.base import EntityDTO
from storefront.services.crud_service import CrudService, EagerLoadingCrudService

logger = logging.getLogger(__name__)


def ensure_new(body_id: Optional[int], entity_name: str) -> None:
    if body_id is not None:
        raise BadRequestAlertException(
            f"A new {entity_name} cannot already have an ID", entity_name, "idexists"
        )


def ensure_updatable(path_id: int, body_id: Optional[int], service: CrudService, entity_name: str) -> None:
    """
    Validate the ids of a PUT/PATCH request

    Raises:
        BadRequestAlertException: idnull, idinvalid or idnotfound
    """
    if body_id is None:
        raise BadRequestAlertException("Invalid id", entity_name, "idnull")
    if path_id != body_id:
        raise IdentifierMismatch(entity_name)
    if not service.exists(path_id):
        raise BadRequestAlertException("Entity not found", entity_name, "idnotfound")


def paged_response(items, total: int, limit: Optional[int], offset: int) -> dict:
    return {
        "status": "success",
        "total": total,
        "limit": limit,
        "offset": offset,
        "count": len(items),
        "data": [item.to_dict() for item in items],
    }


def list_response(items) -> dict:
    return {
        "status": "success",
        "count": len(items),
        "data": [item.to_dict() for item in items],
    }


def _page_params(limit: int = Query(20, ge=1, le=1000), offset: int = Query(0, ge=0)) -> Tuple[Optional[int], int]:
    return limit, offset


def _no_page_params() -> Tuple[Optional[int], int]:
    return None, 0


def _eagerload_param(eagerload: bool = Query(False, description="Include related records")) -> bool:
    return eagerload


def _no_eagerload_param() -> bool:
    return False


def build_crud_router(
    service_cls: Type[CrudService],
    dto_cls: Type[EntityDTO],
    patch_cls: Type[BaseModel],
    entity_name: str,
    resource_path: str,
    label: str,
    paged: bool = False,
) -> APIRouter:
    """
    Router with create, update, partial update, list, get and delete

    Args:
        service_cls: Service handling the entity
        dto_cls: Schema for create/update bodies and responses
        patch_cls: Schema for partial update bodies
        entity_name: Name used in alert headers and error details (e.g. productCategory)
        resource_path: Public path of the collection, used for Location headers
        label: Human readable name for error messages (e.g. product category)
        paged: List endpoint takes limit/offset and returns the paged envelope

    The list endpoint accepts ``eagerload`` when the service can load
    relationships eagerly.
    """
    router = APIRouter()

    page_params = _page_params if paged else _no_page_params
    supports_eager = issubclass(service_cls, EagerLoadingCrudService)
    eagerload_param = _eagerload_param if supports_eager else _no_eagerload_param

    def get_service(db: Session = Depends(get_db)) -> CrudService:
        return service_cls(db)

    @router.post("", status_code=status.HTTP_201_CREATED, name=f"create_{entity_name}")
    def create_entity(dto: dto_cls, response: Response, service: CrudService = Depends(get_service)):
        logger.debug(f"REST request to save {entity_name} : {dto}")
        ensure_new(dto.id, entity_name)

        try:
            result = service.save(dto)
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Error creating {label}: {str(e)}")

        response.headers["Location"] = f"{resource_path}/{result.id}"
        response.headers.update(entity_creation_headers(entity_name, result.id))
        return {"status": "success", "data": result.to_dict()}

    @router.put("/{entity_id}", name=f"update_{entity_name}")
    def update_entity(
        entity_id: int,
        dto: dto_cls,
        response: Response,
        service: CrudService = Depends(get_service)
    ):
        logger.debug(f"REST request to update {entity_name} : {entity_id}, {dto}")
        ensure_updatable(entity_id, dto.id, service, entity_name)

        try:
            result = service.update(dto)
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Error updating {label}: {str(e)}")

        # Deleted after the existence check
        if result is None:
            raise NotFound(entity_name, entity_id)

        response.headers.update(entity_update_headers(entity_name, entity_id))
        return {"status": "success", "data": result.to_dict()}

    @router.patch("/{entity_id}", name=f"partial_update_{entity_name}")
    def partial_update_entity(
        entity_id: int,
        patch: patch_cls,
        response: Response,
        service: CrudService = Depends(get_service)
    ):
        """Partially update a record; null fields in the body are ignored"""
        logger.debug(f"REST request to partial update {entity_name} : {entity_id}, {patch}")
        ensure_updatable(entity_id, patch.id, service, entity_name)

        try:
            result = service.partial_update(patch)
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Error updating {label}: {str(e)}")

        if result is None:
            raise NotFound(entity_name, entity_id)

        response.headers.update(entity_update_headers(entity_name, entity_id))
        return {"status": "success", "data": result.to_dict()}

    @router.get("", name=f"list_{entity_name}")
    def list_entities(
        page: Tuple[Optional[int], int] = Depends(page_params),
        eagerload: bool = Depends(eagerload_param),
        service: CrudService = Depends(get_service)
    ):
        limit, offset = page
        try:
            if eagerload:
                items, total = service.find_all_with_eager_relationships(limit=limit, offset=offset)
            else:
                items, total = service.find_all(limit=limit, offset=offset)
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Error fetching {label} list: {str(e)}")

        if paged:
            return paged_response(items, total, limit, offset)
        return list_response(items)

    @router.get("/{entity_id}", name=f"get_{entity_name}")
    def get_entity(entity_id: int, service: CrudService = Depends(get_service)):
        item = service.find_one(entity_id)
        if item is None:
            raise NotFound(entity_name, entity_id)

        return {"status": "success", "data": item.to_dict()}

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT, name=f"delete_{entity_name}")
    def delete_entity(entity_id: int, service: CrudService = Depends(get_service)):
        logger.debug(f"REST request to delete {entity_name} : {entity_id}")
        service.delete(entity_id)
        return Response(
            status_code=status.HTTP_204_NO_CONTENT,
            headers=entity_deletion_headers(entity_name, entity_id),
        )

    return router
