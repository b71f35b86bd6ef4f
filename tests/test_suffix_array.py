# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from plagdetect.suffix_array import lcp_array, suffix_array
from random import Random

def naive_suffix_array(seq):
    return sorted(range(len(seq)), key = lambda i: seq[i:])

def naive_lcp(seq, i, j):
    k = 0
    while i + k < len(seq) and j + k < len(seq) and seq[i + k] == seq[j + k]:
        k += 1
    return k

def random_texts(n, alphabet):
    rnd = Random(1234)
    for _ in range(n):
        yield ''.join(rnd.choice(alphabet)
                      for _ in range(rnd.randrange(30)))

def test_suffix_array():
    examples = [
        ('', []),
        ('Z', [0]),
        ('ABAC', [0, 2, 1, 3]),
        ('banana', [5, 3, 1, 0, 4, 2]),
        ('abaab', [2, 3, 0, 4, 1]),
        ('ABABBAB', [5, 0, 2, 6, 4, 1, 3]),
        ('aaaa', [3, 2, 1, 0])]

    for seq, sa in examples:
        assert suffix_array(seq) == sa

def test_suffix_array_tokens():
    seq = ['P2', 'P0', 'P2', 'P0', 'P-2']
    assert suffix_array(seq) == naive_suffix_array(seq)

def test_suffix_array_random():
    for seq in random_texts(200, 'ab#'):
        assert suffix_array(seq) == naive_suffix_array(seq)

def test_lcp_array():
    examples = [
        ('BANANA', [0, 1, 3, 0, 0, 2]),
        ('ABABBAB', [0, 2, 2, 0, 1, 3, 1]),
        ('aaaa', [0, 1, 2, 3])
        ]
    for seq, lcp in examples:
        sa = suffix_array(seq)
        assert lcp_array(seq, sa)[1] == lcp

def test_lcp_array_random():
    for seq in random_texts(200, 'abc'):
        sa = suffix_array(seq)
        rank, lcp = lcp_array(seq, sa)
        assert all(sa[r] == i for i, r in enumerate(rank))
        if lcp:
            assert lcp[0] == 0
        for i in range(1, len(sa)):
            assert lcp[i] == naive_lcp(seq, sa[i - 1], sa[i])
