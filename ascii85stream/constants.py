"""
Fixed values for base-85 arithmetic and the Ascii85 alphabet
"""

# positional weights, most significant digit first (85 ** 4 ... 85 ** 0)
C1_BIAS = 52200625
C2_BIAS = 614125
C3_BIAS = 7225
C4_BIAS = 85
WEIGHTS = (C1_BIAS, C2_BIAS, C3_BIAS, C4_BIAS, 1)

CHARACTER_BLOCK_SIZE = 5  # (encoded size) number of ascii85 chars per chunk
BINARY_BLOCK_SIZE = 4  # (decoded size) number of raw bytes per chunk

# digit 0 is '!' (33), digit 84 is 'u' (117)
BINARY_TO_CHAR_BIAS = 33
FIRST_CHAR = '!'
LAST_CHAR = 'u'
MAX_DIGIT = ord(LAST_CHAR) - BINARY_TO_CHAR_BIAS

# stands for a complete group of 4 zero bytes
CHAR_FOR_4_ZEROS = 'z'

MAX_GROUP_VALUE = 0xFFFFFFFF
