"""
Caller identity: bearer-token verification for protected routes.
"""
