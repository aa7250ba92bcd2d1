"""Star system generation.

The full pipeline lives in `hexsector.engine.sector_generator`; it is not
re-exported here because it depends on the renderer, which in turn depends
on this package.
"""

from .generator import StarSystemGenerator
from .tables import STARPORT_TABLE

__all__ = [
    "STARPORT_TABLE",
    "StarSystemGenerator",
]
