"""Weighted edit distance with edit-script reconstruction.

Only two rows of the dynamic-programming matrix are kept alive at a time. Each
cell links to the cell it was derived from, so the optimal edit script can
still be recovered from the last cell.
"""


import logging


from enum import Enum
from typing import Any, Callable, Iterable, Iterator, List, NamedTuple, \
        Optional, Sequence, Tuple


class Op(Enum):
    DEL = 1
    INS = 2
    SUB = 3
    MATCH = 4


class Edit(NamedTuple):
    op: Optional[Op]
    char: Any
    sub: Any = None # only set for Op.SUB

    def __str__(self) -> str:
        if self.op is None:
            return 'INITIAL'
        if self.op == Op.SUB:
            return f'{self.op.name} {self.char} with {self.sub}'
        return f'{self.op.name} {self.char}'


INITIAL = Edit(None, None)


Cost = float
Policy = Callable[[Edit, int], Cost]
Script = List[Edit]
String = Sequence[Any]


class InvalidInput(ValueError):
    pass


class ThresholdExceeded(Exception):

    def __init__(self, row: int, threshold: Cost):
        super().__init__(f'no cell in row {row} is below threshold {threshold}')
        self.row = row
        self.threshold = threshold


class Trace:
    """One cell of the matrix: accumulated cost, the edit leading into it and
    the cell it came from.

    Cells are never modified after creation.
    """

    __slots__ = ('cost', 'edit', 'prev')

    def __init__(self, cost: Cost, edit: Edit, prev: Optional['Trace']):
        self.cost = cost
        self.edit = edit
        self.prev = prev

    def __repr__(self) -> str:
        return f'Trace(cost={self.cost}, edit={self.edit})'


class Result(NamedTuple):
    cost: Cost
    script: Script


def chain(string: String, op: Op, policy: Policy) -> Trace:
    result = Trace(0.0, INITIAL, None)
    for i, char in enumerate(string, 1):
        edit = Edit(op, char)
        result = Trace(result.cost + policy(edit, i), edit, result)
    return result


Candidate = Tuple[Cost, Edit, Trace]


def best(candidates: Iterable[Candidate]) -> Candidate:
    """Returns the cheapest candidate. On ties the earliest one wins."""
    record = float('Inf')
    record_holder = None
    for candidate in candidates:
        if record_holder is None or candidate[0] < record:
            record = candidate[0]
            record_holder = candidate
    return record_holder


def trace(source: String, target: String, policy: Policy,
        threshold: Cost=float('inf')) -> Trace:
    if source is None or target is None:
        raise InvalidInput('source and target must not be None')
    height = len(source) + 1
    width = len(target) + 1
    if width == 1:
        return chain(source, Op.DEL, policy)
    if height == 1:
        return chain(target, Op.INS, policy)
    prev_row: List[Trace] = [Trace(0.0, INITIAL, None)]
    for j in range(1, width):
        edit = Edit(Op.INS, target[j - 1])
        prev_row.append(Trace(
            prev_row[j - 1].cost + policy(edit, j),
            edit,
            prev_row[j - 1],
        ))
    row: List[Trace] = list(prev_row)
    for i in range(1, height):
        char = source[i - 1]
        dlt = Edit(Op.DEL, char)
        row[0] = Trace(prev_row[0].cost + policy(dlt, i), dlt, prev_row[0])
        for j in range(1, width):
            target_char = target[j - 1]
            if char == target_char:
                sub = Edit(Op.MATCH, char)
            else:
                sub = Edit(Op.SUB, char, target_char)
            ins = Edit(Op.INS, target_char)
            sub_cost = prev_row[j - 1].cost + policy(sub, i)
            del_cost = prev_row[j].cost + policy(dlt, i)
            ins_cost = row[j - 1].cost + policy(ins, j)
            # Order decides ties: substitution/match, insertion, deletion
            row[j] = Trace(*best((
                (sub_cost, sub, prev_row[j - 1]),
                (ins_cost, ins, row[j - 1]),
                (del_cost, dlt, prev_row[j]),
            )))
        row_min = min(cell.cost for cell in row)
        logging.debug('row %d: minimum cost %s', i, row_min)
        if row_min >= threshold:
            raise ThresholdExceeded(i, threshold)
        # The finished row becomes the previous one; the old previous row's
        # slots are overwritten next. Cells still reachable through prev links
        # stay alive.
        prev_row, row = row, prev_row
    logging.debug('distance: %s', prev_row[-1].cost)
    return prev_row[-1]


def distance(trace: Trace) -> Cost:
    return trace.cost


def script(trace: Trace) -> Script:
    result: Script = []
    while trace.edit is not INITIAL:
        result.append(trace.edit)
        trace = trace.prev
    result.reverse()
    return result


def reconstruct(trace: Trace) -> Result:
    return Result(distance(trace), script(trace))


def edit_distance(source: String, target: String, policy: Policy,
        threshold: Cost=float('inf')) -> Result:
    return reconstruct(trace(source, target, policy, threshold))


def positions(script: Iterable[Edit]) -> Iterator[Tuple[Edit, int]]:
    """Pairs each edit with the index its cost was charged at.

    Insertions are charged at their (1-based) index in the target, all other
    edits at their index in the source.
    """
    i = 0
    j = 0
    for edit in script:
        if edit.op == Op.INS:
            j += 1
            yield edit, j
        elif edit.op == Op.DEL:
            i += 1
            yield edit, i
        else:
            i += 1
            j += 1
            yield edit, i


def script_cost(script: Iterable[Edit], policy: Policy) -> Cost:
    cost = 0.0
    for edit, index in positions(script):
        cost += policy(edit, index)
    return cost


def apply(script: Iterable[Edit], source: String) -> List[Any]:
    """Replays an edit script against source and returns the target items.

    Raises ValueError if the script does not fit source.
    """
    result: List[Any] = []
    i = 0
    for edit in script:
        if edit.op == Op.INS:
            result.append(edit.char)
            continue
        if i >= len(source):
            raise ValueError(f'{edit} past the end of source')
        if source[i] != edit.char:
            raise ValueError(f'{edit} does not fit {source[i]!r} at {i}')
        if edit.op == Op.SUB:
            result.append(edit.sub)
        elif edit.op == Op.MATCH:
            result.append(edit.char)
        i += 1
    if i != len(source):
        raise ValueError(f'script leaves {len(source) - i} source items unconsumed')
    return result


def pp_script(script: Iterable[Edit]) -> str:
    return ', '.join(str(e) for e in script)
