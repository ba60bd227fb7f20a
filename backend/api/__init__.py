"""
API routes module.

FastAPI routers for all HTTP endpoints. The application factory lives in
backend.api.main.
"""
