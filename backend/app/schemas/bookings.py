from typing import Optional

from pydantic import BaseModel

from app.schemas._document import DocumentBody


class BookingCreate(DocumentBody):
    # Service fields copied into the booking come along as extras
    serviceId: Optional[str] = None
    userEmail: Optional[str] = None
    userName: Optional[str] = None
    providerEmail: str
    status: Optional[str] = None
    serviceDate: Optional[str] = None
    instructions: Optional[str] = None


class BookingStatusUpdate(BaseModel):
    # Open string; no transition table is enforced
    updateStatus: str
