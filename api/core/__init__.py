"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (settings, logging,
DB wiring). Board-specific SQL and business logic stay in `boards/`.
"""
