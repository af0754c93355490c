"""
Locale processors - suggestion, resolution, projection, authenticity
"""
from . import suggestion
from . import resolution
from . import projection
from . import authenticity

__all__ = [
    'suggestion',
    'resolution',
    'projection',
    'authenticity',
]
