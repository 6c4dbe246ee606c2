from .mapper import Mapper
from .profile import DISPLAY_DATE_FORMAT, build_mapper, default_mapper

__all__ = ["Mapper", "DISPLAY_DATE_FORMAT", "build_mapper", "default_mapper"]
