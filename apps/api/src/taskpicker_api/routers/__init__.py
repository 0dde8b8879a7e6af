# API routers package
from . import selection, workspace

__all__ = ["selection", "workspace"]
