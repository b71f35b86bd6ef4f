# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Constants for the detector.

# Candidate code points for the symbol joining the two documents. NUL
# first, then the private use area which real text rarely contains.
SEPARATOR_CODES = [0] + list(range(0xe000, 0xf900))

LEVEL_VERY_LOW = 'Very Low'
LEVEL_LOW = 'Low'
LEVEL_MODERATE = 'Moderate'
LEVEL_HIGH = 'High'

# Upper bounds (exclusive) of each level.
LEVEL_THRESHOLDS = [
    (10, LEVEL_VERY_LOW),
    (30, LEVEL_LOW),
    (60, LEVEL_MODERATE)
]

# Max number of characters of the matched text to print.
PREVIEW_LEN = 200

EXAMPLE_PAIRS = [
    ('The quick brown fox jumps over the lazy dog',
     'A lazy dog sleeps while the quick brown fox jumps'),
    ('AAAAA', 'BBBBB'),
    ('plagiarism detection system',
     'plagiarism detection system'),
    ('algorithm design and analysis of algorithms',
     'analysis requires good algorithm knowledge')
]
