from .api_endpoints import ENDPOINTS

__all__ = ["ENDPOINTS"]
