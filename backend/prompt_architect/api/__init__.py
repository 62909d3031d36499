from prompt_architect.api.routes import router

__all__ = ["router"]
