# SPDX-License-Identifier: MIT
#
# Copyright (c) 2024 strictmagic project team members

import re

__version__ = "0.1.0"

ACCESSOR_PREFIX = re.compile(r"^(get|set|has|is|add)(?=[A-Z])")

INSERT_COST = 11
REPLACE_COST = 10
DELETE_COST = 10
NORMALIZED_PENALTY = 20


def normalize(name):
    """strip a leading accessor prefix: getFoo -> Foo, isFoo -> Foo"""
    return ACCESSOR_PREFIX.sub("", name, count=1)


def levenshtein(
    source,
    target,
    insert_cost=INSERT_COST,
    replace_cost=REPLACE_COST,
    delete_cost=DELETE_COST,
):
    """weighted edit distance for turning source into target"""
    if not source:
        return len(target) * insert_cost
    if not target:
        return len(source) * delete_cost

    previous_row = [j * insert_cost for j in range(len(target) + 1)]
    for i, s in enumerate(source, 1):
        current_row = [i * delete_cost]
        for j, t in enumerate(target, 1):
            substitution = previous_row[j - 1] + (0 if s == t else replace_cost)
            insertion = current_row[j - 1] + insert_cost
            deletion = previous_row[j] + delete_cost
            current_row.append(min(substitution, insertion, deletion))
        previous_row = current_row

    return previous_row[-1]


def candidate_name(item):
    if isinstance(item, str):
        return item
    if isinstance(item, (staticmethod, classmethod)):
        item = item.__func__
    return item.__name__


def unique(candidates):
    seen = set()
    for item in candidates:
        name = candidate_name(item)
        if name in seen:
            continue
        seen.add(name)
        yield name


def get_spelling_suggestion(candidates, target):
    """Find the closest candidate to target, or None when nothing is close enough.

    Candidates are visited in the order given, duplicates dropped. A candidate
    is scored by its plain edit distance to target, or failing that, by the
    distance between the prefix-stripped forms plus a fixed penalty. The best
    score so far becomes the bar the next candidate must beat, so ties go to
    the first candidate seen.
    """
    norm = normalize(target)
    best = None
    threshold = (len(target) / 4 + 1) * 10 + 0.1

    for item in unique(candidates):
        if item == target:
            continue
        score = levenshtein(item, target)
        if score >= threshold:
            score = levenshtein(normalize(item), norm) + NORMALIZED_PENALTY
        if score < threshold:
            threshold = score
            best = item

    return best
