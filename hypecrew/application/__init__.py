"""
Application layer: use cases, DTOs and the per-session state that sits
between the web routers and the domain.
"""
