"""Pydantic schemas"""
from typing import Optional, List, Dict, Literal
from pydantic import BaseModel, Field


# === Input (seed documents) ===

class AvailabilityWindowIn(BaseModel):
    day: Literal["weekday", "weekend"]
    opensAt: str = Field(..., pattern=r"^\d{1,2}:\d{2}$")
    closesAt: str = Field(..., pattern=r"^\d{1,2}:\d{2}$")


class ContactMethodIn(BaseModel):
    type: Optional[str] = None
    value: str = Field(..., min_length=1)
    instruction: Optional[str] = None
    availability: List[AvailabilityWindowIn] = []


class ContactIn(BaseModel):
    voice: Optional[ContactMethodIn] = None
    text: Optional[ContactMethodIn] = None
    email: Optional[ContactMethodIn] = None
    webchat: Optional[ContactMethodIn] = None


class HelplineIn(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    contact: ContactIn = ContactIn()


# === Responses ===

class AvailabilityWindowOut(BaseModel):
    """Stored windows are rendered as-is, including legacy day-list/from-to forms"""
    day: Optional[str] = None
    days: Optional[List[str]] = None
    opensAt: Optional[str] = None
    closesAt: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None


class ContactMethodOut(BaseModel):
    type: Optional[str] = None
    value: Optional[str] = None
    instruction: Optional[str] = None
    availability: List[AvailabilityWindowOut] = []


class HelplineOut(BaseModel):
    id: Optional[int] = None
    name: str
    description: str
    contact: Dict[str, ContactMethodOut] = {}

    class Config:
        from_attributes = True


class HelplineListResponse(BaseModel):
    success: bool = True
    data: List[HelplineOut]


class ErrorResponse(BaseModel):
    success: bool = False
    message: str


class StatusOut(BaseModel):
    message: str
