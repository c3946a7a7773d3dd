from .repository import Repository, RepositoryList

__all__ = ["Repository", "RepositoryList"]
