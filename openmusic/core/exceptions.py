# ============================================================================
# FILE: openmusic/core/exceptions.py
# ============================================================================

class ClientError(Exception):
    """Base class for errors caused by the client request"""
    
    status_code = 400
    
    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

class InvariantError(ClientError):
    """A write affected no rows or a business rule was violated"""
    status_code = 400

class AuthenticationError(ClientError):
    """Missing or invalid credentials"""
    status_code = 401

class AuthorizationError(ClientError):
    """Caller has no rights over the requested resource"""
    status_code = 403

class NotFoundError(ClientError):
    """Referenced entity does not exist"""
    status_code = 404
