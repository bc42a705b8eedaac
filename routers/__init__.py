# Router package initialization
from .profanity import profanity_router

__all__ = ["profanity_router"]
