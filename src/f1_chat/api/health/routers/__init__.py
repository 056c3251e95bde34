from f1_chat.api.health.routers.server import router

__all__ = ["router"]
