# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package."""
from team_builder.repositories.member_store import CollectionStore

__all__ = ["CollectionStore"]
