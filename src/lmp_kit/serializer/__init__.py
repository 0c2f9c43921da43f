from .serializer import LmpSerializer, serialize

__all__ = [
    "LmpSerializer",
    "serialize",
]
