"""Declarative base for the substrate tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
