from .id_numbers import age_from_id_number
from .value_objects import ConsentDirection, ConsentType, Gender

__all__ = [
    "ConsentDirection",
    "ConsentType",
    "Gender",
    "age_from_id_number",
]
