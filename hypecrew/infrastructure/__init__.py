"""
Infrastructure layer for the HypeCrew marketplace.

This layer contains the implementation details for external systems integration:
- Supabase client (auth and PostgREST)
- Per-browser session management
- Web layer (FastAPI routers and middleware)
"""
