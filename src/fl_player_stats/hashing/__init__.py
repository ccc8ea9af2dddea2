"""
Freelancer id hashing and the archetype lookup built on it.
"""

from .flhash import flhash, to_unsigned
from .archetypes import ArchetypeLookup

__all__ = ['flhash', 'to_unsigned', 'ArchetypeLookup']
