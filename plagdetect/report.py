# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Plagiarism reports for pairs of documents.
from collections import namedtuple
from plagdetect.aggregate import (total_copied_length,
                                  total_copied_length_symmetric)
from plagdetect.defs import PREVIEW_LEN
from plagdetect.matching import best_match, detect_all_matches, detect_best
from plagdetect.scoring import level, percent
from plagdetect.utils import SP, print_term_table, shorten
from time import time

Report = namedtuple('Report', [
    'len_a',
    'len_b',
    'best',
    'matched_text',
    'copied_len',
    'elapsed'])

def analyze_documents(doc_a, doc_b,
                      aggregate = False, symmetric = False,
                      separator = None):
    start = time()
    copied_len = None
    with SP.section('ANALYZING DOCUMENTS'):
        if aggregate:
            matches = detect_all_matches(doc_a, doc_b, separator)
            best = best_match(matches)
            if symmetric:
                copied_len = total_copied_length_symmetric(
                    matches, len(doc_a), len(doc_b))
            else:
                copied_len = total_copied_length(matches, len(doc_a))
            SP.print('%d characters copied in total.' % copied_len)
        else:
            best = detect_best(doc_a, doc_b, separator)
    elapsed = time() - start
    matched_text = doc_a[best.pos_a:best.pos_a + best.length]
    return Report(len(doc_a), len(doc_b), best, matched_text,
                  copied_len, elapsed)

def score_rows(report):
    lengths = [('Longest match', report.best.length)]
    if report.copied_len is not None:
        lengths.append(('Copied total', report.copied_len))
    rows = []
    for label, n in lengths:
        pct_a = percent(n, report.len_a)
        pct_b = percent(n, report.len_b)
        rows.append((label, n, pct_a, level(pct_a), pct_b, level(pct_b)))
    return rows

def print_report(report, preview_len = PREVIEW_LEN):
    print()
    print('=========== Plagiarism Report ===========')
    print('Matched Length: %d characters' % report.best.length)
    if report.best.length > 0:
        preview = shorten(report.matched_text, preview_len)
        print('Longest Common Substring (preview): "%s"' % preview)
    print()
    row_fmt = ['%s', '%d', '%.2f%%', '%s', '%.2f%%', '%s']
    header = ['Measure', 'Length', 'Doc. A', 'Level A', 'Doc. B', 'Level B']
    print_term_table(row_fmt, score_rows(report), header, 'lrrlrl')
    print()
    print('Execution Time: %d ms' % round(report.elapsed * 1000))
    print('Time Complexity: O((m+n) log(m+n))')
    print('=========================================')
