"""
Utility modules for restrand.

Author: Kevin R. Roy
"""

from .sequence import (
    DNA_COMPLEMENT,
    complement,
    reverse_complement,
    reverse_quality,
)

__all__ = [
    'DNA_COMPLEMENT',
    'complement',
    'reverse_complement',
    'reverse_quality',
]
