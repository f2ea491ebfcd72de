"""Declarative base shared by userbase tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
