# Wrapper delimiters
BEGIN_DELIMITER = "<~"
END_DELIMITER = "~>"

# Alphabet: digits 0..84 rendered as code points 33 ('!') .. 117 ('u')
DIGIT_BASE = 85
FIRST_DIGIT = 33   # '!'
LAST_DIGIT = 117   # 'u'
LAST_PRINTABLE = 126  # '~'

# Ignored between digits: space, \t, \n, \r, \v, \f
WHITESPACE = " \t\n\r\x0b\x0c"

# All-zero group shorthand
ZERO_GROUP = 122   # 'z'
ZERO_GROUP_CHAR = chr(ZERO_GROUP)

# Group geometry
BYTES_PER_GROUP = 4
CHARS_PER_GROUP = 5

MAX_GROUP_VALUE = 0xFFFFFFFF  # 2**32 - 1

# Most-significant first: 85**4 .. 85**0
POW85 = tuple(DIGIT_BASE ** k for k in range(CHARS_PER_GROUP - 1, -1, -1))
