"""
Wanderlust Backend
===================

REST backend for the Wanderlust travel site: contact-form submissions and
a list of favourite places, persisted through async SQLAlchemy.

Layers:
    routes/     HTTP concerns only (body parsing, status codes)
    services/   business rules (validation, duplicate check)
    schemas/    Pydantic request/response contracts
    models/     SQLAlchemy ORM tables
    database.py persistence client and per-request sessions
"""

__version__ = "1.0.0"
