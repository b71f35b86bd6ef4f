# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from plagdetect.scoring import level, percent

def test_percent():
    assert percent(0, 10) == 0
    assert percent(7, 0) == 0
    assert percent(0, 0) == 0
    assert percent(5, 20) == 25.0
    assert percent(27, 27) == 100.0

def test_level():
    examples = [
        (0.0, 'Very Low'),
        (9.999, 'Very Low'),
        (10.0, 'Low'),
        (29.999, 'Low'),
        (30.0, 'Moderate'),
        (59.999, 'Moderate'),
        (60.0, 'High'),
        (100.0, 'High')]
    for pct, name in examples:
        assert level(pct) == name
