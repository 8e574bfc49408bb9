from .crud import CrudModule
from .transport import FHIRTransport, RequestSpec

__all__ = ["CrudModule", "FHIRTransport", "RequestSpec"]
