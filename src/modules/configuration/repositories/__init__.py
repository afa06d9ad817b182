"""Configuration repositories package."""

from modules.configuration.repositories.django_repository import VatDjangoRepository
from modules.configuration.repositories.interfaces import IVatRepository

__all__ = ["IVatRepository", "VatDjangoRepository"]
