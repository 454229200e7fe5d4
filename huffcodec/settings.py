"""
settings.py

Format constants shared across huffcodec.
"""


BITS_PER_WORD = 8
BITS_PER_INT = 32

ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE

# a leaf value must hold every byte plus PSEUDO_EOF
LEAF_VALUE_BITS = BITS_PER_WORD + 1

HUFF_NUMBER = 0xface8200
HUFF_TREE = HUFF_NUMBER | 1
