"""
Jotter Backend - Personal Notes API

A small backend for registering users and keeping private notes,
with search, sorting and pagination.
"""

__version__ = "1.0.0"
