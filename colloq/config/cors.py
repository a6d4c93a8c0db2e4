"""CORS configuration for the FastAPI application."""

import os

from .environment import IS_PRODUCTION_ENVIRONMENT

# CORS Origins configuration
ALLOWED_ORIGINS = {
    False: ["*"],  # Development - allow all
    True: [        # Production - restricted to the configured frontend
        origin.strip()
        for origin in os.environ.get('FRONTEND_ORIGINS', '').split(',')
        if origin.strip()
    ]
}

# CORS Methods configuration
ALLOWED_METHODS = [
    "GET",      # Browsing events and the dashboard
    "POST",     # Signup, login, event creation and registration
    "OPTIONS"   # Required for CORS preflight
]

# CORS Headers configuration
ALLOWED_HEADERS = [
    "Authorization",  # Bearer session token
    "Content-Type",   # For request bodies
    "Accept",        # For content negotiation
]

# Additional CORS settings
CORS_CONFIG = {
    "allow_origins": ALLOWED_ORIGINS[IS_PRODUCTION_ENVIRONMENT],
    "allow_credentials": True,
    "allow_methods": ALLOWED_METHODS,
    "allow_headers": ALLOWED_HEADERS,
    "expose_headers": [],
    "max_age": 3600,
}
