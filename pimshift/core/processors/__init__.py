from .images import ImagesProcessor
from .prices import PriceProcessor, to_minor_units

__all__ = ["ImagesProcessor", "PriceProcessor", "to_minor_units"]
