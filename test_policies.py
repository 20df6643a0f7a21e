import brew
import math
import policies
import unittest


Edit = brew.Edit
DEL = brew.Op.DEL
INS = brew.Op.INS
SUB = brew.Op.SUB
MATCH = brew.Op.MATCH


class PoliciesTestCase(unittest.TestCase):

    def test_unit(self):
        cases = (
            (Edit(MATCH, 'a'), 0.0),
            (Edit(SUB, 'a', 'b'), 1.0),
            (Edit(INS, 'a'), 1.0),
            (Edit(DEL, 'a'), 1.0),
        )
        for edit, cost in cases:
            self.assertEqual(policies.unit(edit, 1), cost)

    def test_weighted(self):
        policy = policies.weighted(delete=0.5, insert=2.0, substitute=3.0, match=0.25)
        cases = (
            (Edit(MATCH, 'a'), 0.25),
            (Edit(SUB, 'a', 'b'), 3.0),
            (Edit(INS, 'a'), 2.0),
            (Edit(DEL, 'a'), 0.5),
        )
        for edit, cost in cases:
            self.assertEqual(policy(edit, 7), cost)
        self.assertEqual(brew.edit_distance('ab', 'b', policy).cost, 0.75)

    def test_table(self):
        policy = policies.table({
            (SUB, '0', 'o'): 0.1,
            (INS, ' '): 0.5,
        })
        cases = (
            (Edit(SUB, '0', 'o'), 0.1),
            (Edit(SUB, 'o', '0'), 1.0),
            (Edit(INS, ' '), 0.5),
            (Edit(DEL, ' '), 1.0),
            (Edit(MATCH, 'o'), 0.0),
        )
        for edit, cost in cases:
            self.assertEqual(policy(edit, 1), cost)
        result = brew.edit_distance('f00', 'foo', policy)
        self.assertAlmostEqual(result.cost, 0.2)
        self.assertEqual(result.script, [
            Edit(MATCH, 'f'),
            Edit(SUB, '0', 'o'),
            Edit(SUB, '0', 'o'),
        ])

    def test_ignoring(self):
        policy = policies.ignoring({' '})
        self.assertEqual(policy(Edit(DEL, ' '), 1), 0.0)
        self.assertEqual(policy(Edit(SUB, ' ', 'x'), 1), 0.0)
        self.assertEqual(policy(Edit(SUB, 'x', ' '), 1), 1.0)
        self.assertEqual(brew.edit_distance('New york', 'newyork', policy).cost, 1.0)

    def test_ignore_case(self):
        policy = policies.ignore_case(policies.ignoring({' '}))
        self.assertEqual(policy(Edit(SUB, 'N', 'n'), 1), 0.0)
        self.assertEqual(policy(Edit(SUB, 'N', 'm'), 1), 1.0)
        self.assertEqual(policy(Edit(SUB, ('N',), ('n',)), 1), 1.0)
        self.assertEqual(brew.edit_distance('New york', 'newyork', policy).cost, 0.0)

    def test_ignore_punctuation(self):
        policy = policies.ignore_punctuation()
        self.assertEqual(policy(Edit(DEL, ','), 1), 0.0)
        self.assertEqual(policy(Edit(INS, '.'), 1), 0.0)
        self.assertEqual(policy(Edit(DEL, 'a'), 1), 1.0)
        result = brew.edit_distance(
            ['Hello', ',', 'world', '.'],
            ['Hello', 'world'],
            policy,
        )
        self.assertEqual(result.cost, 0.0)

    def test_positional(self):
        policy = policies.positional(policies.unit, [0.5, 2.0])
        cases = (
            (1, 0.5),
            (2, 2.0),
            (3, 1.0),
        )
        for index, cost in cases:
            self.assertEqual(policy(Edit(DEL, 'a'), index), cost)
        # Deleting the first character is cheaper than deleting the second
        result = brew.edit_distance('aa', 'a', policy)
        self.assertEqual(result.cost, 0.5)
        self.assertEqual(result.script, [Edit(DEL, 'a'), Edit(MATCH, 'a')])

    def test_validated(self):
        policy = policies.validated(policies.unit)
        self.assertEqual(policy(Edit(DEL, 'a'), 1), 1.0)
        cases = (-1.0, math.nan)
        for bad in cases:
            with self.assertRaises(ValueError):
                policies.validated(lambda edit, index: bad)(Edit(DEL, 'a'), 1)
