"""
Query Engine - declarative query operators over in-memory records

A small library of composable sequence operators (join, stable multi-key
ordering, deferred grouping, immediate lookups, quantifiers, filters and
element access) demonstrated against employee and department tables.
"""

__version__ = "0.1.0"
__author__ = "Query Engine Contributors"
