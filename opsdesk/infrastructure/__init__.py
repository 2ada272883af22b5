"""
Infrastructure layer for the business operations desk.

This layer contains the implementation details for external systems integration:
- Supabase tables and views (PostgREST)
- Supabase Auth sessions and access tokens
- Supabase Realtime change feeds
- The FastAPI web surface

The infrastructure layer implements interfaces defined in the domain layer,
following the Dependency Inversion Principle of Clean Architecture.
"""
