"""
Core domain models and contracts for MRZ date fields.

This module contains the value types and their serialization contracts,
independent of any record-level MRZ parser that embeds them.
"""
