from .user import SimpleUserSerializer

__all__ = ["SimpleUserSerializer"]
