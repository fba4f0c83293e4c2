"""Client for the WorkOS API: SSO connections, organization memberships and connection webhooks."""

__version__ = "0.2.0"

__all__ = [
    "client",
    "common",
    "sso",
    "sso_types",
    "user_management",
    "users",
    "webhooks",
]