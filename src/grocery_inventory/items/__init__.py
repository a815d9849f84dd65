'''
Items package: the mutable grocery item record.
'''
from .models import Item

__all__ = [
    'Item',
]
