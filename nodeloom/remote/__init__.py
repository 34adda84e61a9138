from .gateway import GatewayResponse, RemoteStoreGateway

__all__ = ["GatewayResponse", "RemoteStoreGateway"]
