"""
Employee and metrics endpoints.

Handlers are plain ``def`` functions: FastAPI runs them on its worker thread
pool, so a slow query only holds its own thread.
"""
import logging
from typing import List, Optional

import psycopg2
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from .db import DatabaseUnavailable
from .errors import ApiError
from .repository import EmployeeRepository
from .schemas import Employee, EmployeeCreate, ErrorResponse, MessageResponse

logger = logging.getLogger(__name__)

STORAGE_ERRORS = (psycopg2.Error, DatabaseUnavailable)

router = APIRouter()


def get_repository(request: Request) -> EmployeeRepository:
    return EmployeeRepository(request.app.state.db)


def get_registry(request: Request) -> CollectorRegistry:
    return request.app.state.registry


@router.get("/employees", response_model=List[Employee], responses={500: {"model": ErrorResponse}})
def list_employees(repo: EmployeeRepository = Depends(get_repository)):
    try:
        return repo.list_all()
    except STORAGE_ERRORS as exc:
        logger.exception("Listing employees failed")
        raise ApiError(500, "Database error") from exc


@router.post(
    "/employees",
    response_model=Employee,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_employee(
    payload: Optional[EmployeeCreate] = None,
    repo: EmployeeRepository = Depends(get_repository),
):
    # falsy values ("" or 0) count as missing
    if payload is None or not payload.name or not payload.role:
        raise ApiError(400, "Missing fields")
    try:
        return repo.create(payload.name, payload.role)
    except STORAGE_ERRORS as exc:
        logger.exception("Adding employee failed")
        raise ApiError(500, "Failed to add employee") from exc


@router.delete(
    "/employees/{employee_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def delete_employee(employee_id: str, repo: EmployeeRepository = Depends(get_repository)):
    try:
        deleted = repo.delete(employee_id)
    except STORAGE_ERRORS as exc:
        logger.exception("Deleting employee %s failed", employee_id)
        raise ApiError(500, "Failed to delete employee") from exc
    if not deleted:
        raise ApiError(404, "Employee not found")
    return {"message": "Employee deleted successfully"}


@router.get("/metrics", include_in_schema=False)
def metrics(registry: CollectorRegistry = Depends(get_registry)) -> Response:
    """Expose Prometheus metrics in text format."""
    try:
        payload = generate_latest(registry)
    except Exception as exc:
        logger.exception("Rendering metrics failed")
        return PlainTextResponse(str(exc), status_code=500)
    return Response(payload, media_type=CONTENT_TYPE_LATEST)


@router.get("/health")
async def health():
    """Liveness probe; does not touch the database."""
    return {"status": "healthy"}
