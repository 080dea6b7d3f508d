"""Platform error taxonomy shared by the core and the platform adapters."""


class PlatformError(Exception):
    """A platform call failed for a reason other than a missing resource or tenant."""


class ResourceNotFoundError(PlatformError):
    """The addressed resource does not exist (any more)."""

    def __init__(self, resource_id: str, message: str | None = None) -> None:
        super().__init__(message or f"Resource {resource_id} not found")
        self.resource_id = resource_id


class TenantNotFoundError(PlatformError):
    """The tenant itself no longer exists or is no longer reachable by the bot."""

    def __init__(self, tenant_id: str, message: str | None = None) -> None:
        super().__init__(message or f"Tenant {tenant_id} not found")
        self.tenant_id = tenant_id
