import io
import os
import tempfile
import unittest
import sys
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from main import cli
from state import JsonFileStore, StorageService


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.state_path = os.path.join(self.tmpdir.name, 'state.json')

    def tearDown(self):
        self.tmpdir.cleanup()

    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli(list(argv) + ['--state_path', self.state_path])
        return code, out.getvalue().strip()

    def saved_state(self):
        return StorageService(JsonFileStore(self.state_path)).load_state()

    def test_expression(self):
        code, output = self.run_cli('2 + 3 * 4')
        self.assertEqual(code, 0)
        self.assertEqual(output, '14')
        saved = self.saved_state()
        self.assertEqual(saved['result'], '14')
        self.assertEqual(saved['history'][0]['expression'], '2 + 3 * 4')

    def test_formatted_result(self):
        _, output = self.run_cli('1000000 + 0.5')
        self.assertEqual(output, '1,000,000.5')

    def test_error(self):
        code, output = self.run_cli('5 / 0')
        self.assertEqual(code, 1)
        self.assertEqual(output, 'Error: Division by zero')

    def test_function(self):
        _, output = self.run_cli('--function', 'cos', '--value', '90')
        self.assertEqual(output, '0')
        _, output = self.run_cli('--function', 'sqrt', '--value', '-1')
        self.assertTrue(output.startswith('Error:'))

    def test_function_requires_value(self):
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            cli(['--function', 'sin', '--state_path', self.state_path])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn('--function requires --value', err.getvalue())
        self.assertIn('usage:', err.getvalue())

    def test_corrupt_state_file_is_recovered(self):
        with open(self.state_path, 'w', encoding='utf-8') as f:
            f.write('garbage')
        code, output = self.run_cli('1 + 2')
        self.assertEqual((code, output), (0, '3'))
        self.assertEqual(self.saved_state()['history'][0]['expression'], '1 + 2')

    def test_percent(self):
        _, output = self.run_cli('--percent', '20', '--base', '100')
        self.assertEqual(output, '20')

    def test_history_and_clear(self):
        self.run_cli('1 + 1')
        self.run_cli('2 + 2')
        _, output = self.run_cli('--history')
        self.assertIn('2 + 2', output)
        self.assertIn('1 + 1', output)

        export_path = os.path.join(self.tmpdir.name, 'history.csv')
        self.run_cli('--export_history', export_path)
        self.assertTrue(os.path.exists(export_path))

        self.run_cli('--clear_history')
        self.assertEqual(self.saved_state()['history'], [])


if __name__ == "__main__":
    unittest.main()
