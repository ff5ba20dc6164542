# thrive/core/error_messages.py
from fastapi import HTTPException, status


class ErrorResponses:
    UNAUTHORIZED = HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    FORBIDDEN = HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    INVALID_ID = HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid id")
    EMPTY_UPDATE = HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields to update")
