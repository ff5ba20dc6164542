from typing import Optional, Union

from app.schemas._document import DocumentBody


# Emails are plain strings: they must match token claims byte for byte
class ServiceCreate(DocumentBody):
    providerEmail: str
    providerName: Optional[str] = None
    serviceName: Optional[str] = None
    serviceImage: Optional[str] = None
    serviceArea: Optional[str] = None
    price: Optional[Union[int, float, str]] = None
    description: Optional[str] = None


class ServiceUpdate(DocumentBody):
    providerEmail: Optional[str] = None
    providerName: Optional[str] = None
    serviceName: Optional[str] = None
    serviceImage: Optional[str] = None
    serviceArea: Optional[str] = None
    price: Optional[Union[int, float, str]] = None
    description: Optional[str] = None
