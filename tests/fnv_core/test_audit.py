"""
tests/fnv_core/test_audit.py
Tests de la Auditoría Masiva (workers en proceso y un lote pequeño con Pool).
"""
import random
import unittest
from fnv_core import audit


class TestAudit(unittest.TestCase):

    def test_primes_verified(self):
        self.assertEqual(audit.verify_primes(), [])

    def test_worker_finds_no_discrepancies(self):
        self.assertEqual(audit.audit_worker((0, 0, 40)), [])
        self.assertEqual(audit.audit_worker((3, 40, 60)), [])

    def test_inputs_are_reproducible(self):
        a = [audit.make_input(random.Random(5)) for _ in range(3)]
        b = [audit.make_input(random.Random(5)) for _ in range(3)]
        self.assertEqual(a, b)

    def test_inputs_respect_max_length(self):
        rng = random.Random(11)
        for _ in range(200):
            self.assertLessEqual(len(audit.make_input(rng)), audit.MAX_INPUT_LEN)

    def test_ff_runs_are_generated(self):
        rng = random.Random(13)
        inputs = [audit.make_input(rng) for _ in range(200)]
        self.assertTrue(any(x and set(x) == {0xFF} for x in inputs))


def test_run_audit_small_batch(capsys):
    assert audit.run_audit(target=12) == 0
    out = capsys.readouterr().out
    assert "12 entradas" in out
    assert "0 discrepancias" in out
    assert "FRACTURA" not in out


if __name__ == '__main__':
    unittest.main()
