__all__ = [
    'UserManager',
]

from .user.manager import UserManager
