"""Process-wide helpers shared by the geometry and game layers."""

from .id_generator import Id, new_id
from .serializable import Serializable

__all__ = ["Id", "Serializable", "new_id"]
