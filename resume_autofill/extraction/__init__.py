from .extractor import extract
from .models import ExtractedData

__all__ = [
    "ExtractedData",
    "extract",
]
