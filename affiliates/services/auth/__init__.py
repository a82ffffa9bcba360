"""
Auth Service - Main Package.

This package provides affiliate registration, authentication and
session management.

Module Structure:
- constants.py: Auth constants and user-facing messages
- crypto.py: Password hashing, token and ID generation
- affiliate_manager.py: Registration and status changes
- session_manager.py: Session lifecycle management
- service.py: Main AuthService class that orchestrates all operations
"""

from .service import AuthService, LoginResult

__all__ = [
    "AuthService",
    "LoginResult",
]
