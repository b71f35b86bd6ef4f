# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Combining matches into a total copied length. Longer matches are
# preferred and a match overlapping an already counted one is dropped
# entirely.
from plagdetect.utils import SP
import numpy as np

def select_matches(matches, len_a, len_b = None):
    '''Greedily picks non-overlapping matches, longest first. Only
    offsets in document A are claimed unless len_b is given, in which
    case the matches must not overlap in document B either.
    '''
    claimed_a = np.zeros(len_a, dtype = bool)
    claimed_b = np.zeros(len_b, dtype = bool) if len_b is not None else None
    kept = []
    for m in sorted(matches, key = lambda m: -m.length):
        range_a = slice(m.pos_a, m.pos_a + m.length)
        range_b = slice(m.pos_b, m.pos_b + m.length)
        if claimed_a[range_a].any():
            continue
        if claimed_b is not None:
            if claimed_b[range_b].any():
                continue
            claimed_b[range_b] = True
        claimed_a[range_a] = True
        kept.append(m)
    SP.print('Kept %d of %d matches.' % (len(kept), len(matches)))
    return kept

def total_copied_length(matches, len_a):
    return sum(m.length for m in select_matches(matches, len_a))

def total_copied_length_symmetric(matches, len_a, len_b):
    return sum(m.length for m in select_matches(matches, len_a, len_b))
