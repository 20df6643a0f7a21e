"""Cost policies for brew.trace.

A policy is any function from an edit and a 1-based position index to a
non-negative cost. The functions here build common ones.
"""


import math


from brew import Cost, Edit, Op, Policy
from discodop.punctuation import PUNCTUATION
from typing import Any, Container, Dict, Sequence, Tuple


DEL_COST = 1.0
INS_COST = 1.0
SUB_COST = 1.0
MATCH_COST = 0.0


def unit(edit: Edit, index: int) -> Cost:
    if edit.op == Op.MATCH:
        return MATCH_COST
    return 1.0


def weighted(delete: Cost=DEL_COST, insert: Cost=INS_COST,
        substitute: Cost=SUB_COST, match: Cost=MATCH_COST) -> Policy:
    costs = {
        Op.DEL: delete,
        Op.INS: insert,
        Op.SUB: substitute,
        Op.MATCH: match,
    }
    def policy(edit: Edit, index: int) -> Cost:
        return costs[edit.op]
    return policy


def table(weights: Dict[Tuple[Any, ...], Cost], default: Policy=unit) -> Policy:
    """Looks up per-item costs.

    Keys are (Op.SUB, a, b), (Op.INS, b), (Op.DEL, a) or (Op.MATCH, a). Edits
    without an entry are priced by default.
    """
    def policy(edit: Edit, index: int) -> Cost:
        if edit.op == Op.SUB:
            key: Tuple[Any, ...] = (edit.op, edit.char, edit.sub)
        else:
            key = (edit.op, edit.char)
        if key in weights:
            return weights[key]
        return default(edit, index)
    return policy


def ignoring(items: Container[Any], policy: Policy=unit) -> Policy:
    """Makes edits whose primary item is in items free.

    For substitutions the primary item is the source item.
    """
    def wrapped(edit: Edit, index: int) -> Cost:
        if edit.char in items:
            return 0.0
        return policy(edit, index)
    return wrapped


def ignore_case(policy: Policy=unit) -> Policy:
    def wrapped(edit: Edit, index: int) -> Cost:
        if edit.op == Op.SUB and isinstance(edit.char, str) \
                and isinstance(edit.sub, str) \
                and edit.char.casefold() == edit.sub.casefold():
            return 0.0
        return policy(edit, index)
    return wrapped


def ignore_punctuation(policy: Policy=unit) -> Policy:
    return ignoring(PUNCTUATION, policy)


def positional(policy: Policy, weights: Sequence[float]) -> Policy:
    """Scales the cost at index i by weights[i - 1].

    Indices beyond the end of weights are scaled by 1.
    """
    def wrapped(edit: Edit, index: int) -> Cost:
        cost = policy(edit, index)
        if index <= len(weights):
            cost *= weights[index - 1]
        return cost
    return wrapped


def validated(policy: Policy) -> Policy:
    def wrapped(edit: Edit, index: int) -> Cost:
        cost = policy(edit, index)
        if math.isnan(cost) or cost < 0:
            raise ValueError(f'invalid cost {cost} for {edit} at {index}')
        return cost
    return wrapped
