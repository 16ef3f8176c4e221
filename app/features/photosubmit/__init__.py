from .routes_photosubmit import router

__all__ = ["router"]
