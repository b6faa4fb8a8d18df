# Profile persistence models, registered on the shared db.Base metadata
from db import Base
from .user_profile import UserProfileRecord

__all__ = [
    "Base",
    "UserProfileRecord",
]
