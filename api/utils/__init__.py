"""Utility modules."""
from api.utils.json_utils import json_dump, json_load, read_json_file
from api.utils.validation import validate_item_index, validate_phase

__all__ = [
    "json_dump",
    "json_load",
    "read_json_file",
    "validate_item_index",
    "validate_phase",
]
