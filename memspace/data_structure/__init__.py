from .links import Link
from .region_list import RegionList

__all__ = ["Link", "RegionList"]
