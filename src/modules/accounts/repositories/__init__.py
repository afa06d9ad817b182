"""Account repositories package."""

from modules.accounts.repositories.django_repository import AccountDjangoDirectory
from modules.accounts.repositories.interfaces import IAccountDirectory

__all__ = ["AccountDjangoDirectory", "IAccountDirectory"]
