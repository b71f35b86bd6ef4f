# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from plagdetect.defs import LEVEL_HIGH, LEVEL_THRESHOLDS

def percent(matched, doc_len):
    if doc_len == 0:
        return 0.0
    return 100 * matched / doc_len

def level(pct):
    for threshold, name in LEVEL_THRESHOLDS:
        if pct < threshold:
            return name
    return LEVEL_HIGH
