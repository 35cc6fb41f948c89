# Services package voor helprob

from .occurrence_counter import OccurrenceCounter
from .signatures import sanitize_signature

__all__ = [
    "OccurrenceCounter",
    "sanitize_signature",
]
