from mcp.server.transport_security import TransportSecuritySettings

from .config import Settings, get_settings

def get_cors_origins(settings: Settings | None = None):
    settings = settings or get_settings()
    return settings.CORS_ALLOWED_ORIGINS or ["*"]

def get_transport_security(settings: Settings | None = None) -> TransportSecuritySettings:
    """
    DNS rebinding protection for the MCP endpoint.
    Only enabled when an explicit host allow-list is configured.
    """
    settings = settings or get_settings()
    return TransportSecuritySettings(
        enable_dns_rebinding_protection=bool(settings.MCP_ALLOWED_HOSTS),
        allowed_hosts=settings.MCP_ALLOWED_HOSTS,
        allowed_origins=settings.MCP_ALLOWED_ORIGINS,
    )
