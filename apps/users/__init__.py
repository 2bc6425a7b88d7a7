"""Users app package.

This module initializes the users app. It defines a custom user model
that logs in by email. A user's marketplace role (user, host, co-host) is
never stored: it is derived on every access from listing ownership and
co-host grants. Use ``apps.users.models.User`` as the AUTH_USER_MODEL
throughout the project.
"""
