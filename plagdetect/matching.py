# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Finding common substrings of two documents. Both documents are
# joined by a separator and all matches are found by scanning
# neighbouring suffixes coming from different documents.
from collections import namedtuple
from plagdetect.defs import SEPARATOR_CODES
from plagdetect.suffix_array import lcp_array, suffix_array
from plagdetect.utils import SP

CombinedText = namedtuple('CombinedText', ['text', 'boundary', 'separator'])

Match = namedtuple('Match', ['pos_a', 'pos_b', 'length'])

NO_MATCH = Match(0, 0, 0)

class SeparatorCollision(ValueError):
    pass

def pick_separator(doc_a, doc_b):
    used = set(doc_a) | set(doc_b)
    for code in SEPARATOR_CODES:
        ch = chr(code)
        if ch not in used:
            return ch
    raise SeparatorCollision('No free separator symbol!')

def combine_texts(doc_a, doc_b, separator = None):
    if separator is None:
        separator = pick_separator(doc_a, doc_b)
    elif len(separator) != 1:
        raise ValueError('Separator must be one character, not %r!'
                         % separator)
    elif separator in doc_a or separator in doc_b:
        raise SeparatorCollision('Separator %r occurs in the documents!'
                                 % separator)
    return CombinedText(doc_a + separator + doc_b, len(doc_a), separator)

def cross_document_matches(combined, sa, lcp):
    boundary = combined.boundary
    for i in range(1, len(sa)):
        length = lcp[i]
        if length == 0:
            continue
        s1, s2 = sa[i - 1], sa[i]
        if s1 < boundary < s2:
            yield Match(s1, s2 - boundary - 1, length)
        elif s2 < boundary < s1:
            yield Match(s2, s1 - boundary - 1, length)

def best_match(matches):
    best = NO_MATCH
    for match in matches:
        if match.length > best.length:
            best = match
    return best

def all_matches(matches):
    return list(matches)

def scan_documents(doc_a, doc_b, separator):
    combined = combine_texts(doc_a, doc_b, separator)
    with SP.section('SCANNING', '%d + %d CHARACTERS',
                    (len(doc_a), len(doc_b))):
        sa = suffix_array(combined.text)
        _, lcp = lcp_array(combined.text, sa)
    return cross_document_matches(combined, sa, lcp)

def detect_best(doc_a, doc_b, separator = None):
    best = best_match(scan_documents(doc_a, doc_b, separator))
    SP.print('Longest match %d characters at %d and %d.'
             % (best.length, best.pos_a, best.pos_b))
    return best

def detect_best_match(doc_a, doc_b, separator = None):
    best = detect_best(doc_a, doc_b, separator)
    return doc_a[best.pos_a:best.pos_a + best.length], best.length

def detect_all_matches(doc_a, doc_b, separator = None):
    matches = all_matches(scan_documents(doc_a, doc_b, separator))
    SP.print('%d matches across the documents.' % len(matches))
    return matches
