"""
The `/boards` resource: owner-scoped task boards.
"""
