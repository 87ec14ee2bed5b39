from core.host.command_gateway import CommandHostGateway
from core.host.gateway import HostSessionGateway

__all__ = ["CommandHostGateway", "HostSessionGateway"]
