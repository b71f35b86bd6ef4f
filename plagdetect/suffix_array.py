# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Suffix and lcp arrays for generic sequences.
from plagdetect.utils import SP
import numpy as np

def suffix_array(seq):
    '''Sorts the suffixes of seq using prefix doubling. Suffixes that run
    out of symbols sort before all others.
    '''
    n = len(seq)
    if n == 0:
        return []
    vocab = sorted(set(seq))
    ch2idx = {ch: i for i, ch in enumerate(vocab)}
    cls = np.array([ch2idx[t] for t in seq], dtype = np.int64)
    inds = np.argsort(cls, kind = 'stable')

    k = 1
    while k < n:
        cls1 = np.full(n, -1, dtype = np.int64)
        cls1[:n - k] = cls[k:]
        inds = np.lexsort((cls1, cls))
        result = np.logical_or(np.diff(cls[inds]),
                               np.diff(cls1[inds]))
        cls[inds[0]] = 0
        cls[inds[1:]] = np.cumsum(result)
        k *= 2
        # All ranks distinct, so more rounds wouldn't change the order.
        if cls[inds[-1]] == n - 1:
            break
    SP.print('Sorted %d suffixes with window %d.' % (n, k))
    return inds.tolist()

def lcp_array(seq, sa):
    '''Returns both the rank array and the lcp array. lcp[i] is the
    length of the common prefix of the suffixes sa[i - 1] and sa[i] and
    lcp[0] is always 0.
    '''
    n = len(sa)
    lcp = [0] * n
    rank = [0] * n
    for i in range(n):
        rank[sa[i]] = i
    k = 0
    for i, rank_el in enumerate(rank):
        if rank_el == 0:
            k = 0
            continue
        j = sa[rank_el - 1]
        while i + k < n and j + k < n and seq[i + k] == seq[j + k]:
            k += 1
        lcp[rank_el] = k
        if k > 0:
            k -= 1
    return rank, lcp
