from fastapi import HTTPException, status


# Base error. Carries the HTTP status the API layer responds with
class PokedexError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(status_code=self.status_code, detail=detail)


# Blank search query or chat question
class ValidationError(PokedexError):
    status_code = status.HTTP_400_BAD_REQUEST


# The catalog has no entity for the query
class NotFoundError(PokedexError):
    status_code = status.HTTP_404_NOT_FOUND


# Transport failure, timeout, upstream 5xx or unreadable payload
class NetworkError(PokedexError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, detail: str):
        super().__init__(detail=f"External API Error: {detail}")


# A sub-fetch of an expansion failed. Wraps the first failure
class AggregationError(PokedexError):
    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, cause: Exception):
        self.cause = cause
        reason = getattr(cause, "detail", None) or str(cause)
        super().__init__(detail=f"Could not assemble Pokemon data: {reason}")


# Gemini call failed or returned an unreadable body
class ChatClientError(PokedexError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, detail: str):
        super().__init__(detail=f"External API Error: {detail}")


# No Gemini API key configured
class MissingCredentialError(PokedexError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
