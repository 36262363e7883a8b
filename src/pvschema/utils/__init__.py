"""
Contains some useful utility functions to query the data inside resolvers and guards.
"""
from .lookup import MISSING, get_nested_value, is_present, required_value
