"""
Pydantic schemas for API requests and responses.
"""
from pydantic import BaseModel
from typing import Any


class EmployeeCreate(BaseModel):
    """Body of POST /employees. The route only checks presence; values reach the INSERT as sent."""
    name: Any = None
    role: Any = None


class Employee(BaseModel):
    """A persisted employee row."""
    id: int
    name: str
    role: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
