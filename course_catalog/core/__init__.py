# Core module - store access and catalog reconstruction
from .database import CatalogConnection
from .assemblers import AuthorResolver, ModuleAssembler, ClipAssembler
from .store import CatalogStore

__all__ = [
    'CatalogConnection',
    'AuthorResolver',
    'ModuleAssembler',
    'ClipAssembler',
    'CatalogStore',
]
