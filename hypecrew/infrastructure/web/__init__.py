"""
Web layer: FastAPI routers and middleware.
"""
