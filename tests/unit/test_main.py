"""
decfloat tests.test_main
unit tests for main script

(c) 2022--2024 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import io
import logging
from contextlib import redirect_stdout

from decfloat import main, Values
from decfloat.main import evaluate
from decfloat.base import error
from tests.unit.utils import TestCase, run_tests


class MainTest(TestCase):
    """Unit tests for main script."""

    tag = u'main'

    def tearDown(self):
        """Detach the log file handlers set up by main."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            handler.flush()
            root_logger.removeHandler(handler)

    def _run(self, *args):
        """Run main and return standard output."""
        output = io.StringIO()
        with redirect_stdout(output):
            main(u'--logfile=%s' % self.output_path(u'log.txt'), *args)
        return output.getvalue()

    def _fails(self, *args):
        """Run main and check it exits with an error."""
        with self.assertRaises(SystemExit) as cm:
            self._run(*args)
        assert cm.exception.code == 1

    def test_version(self):
        """Test version call."""
        output = self._run(u'-v')
        assert output.startswith(u'decfloat '), output

    def test_usage(self):
        """Test usage call."""
        assert self._run(u'-h').startswith(u'Usage:')
        # no operands
        assert self._run().startswith(u'Usage:')

    def test_arithmetic(self):
        """Evaluate expressions."""
        assert self._run(u'1', u'+', u'2') == u'3\n'
        assert self._run(u'21.12', u'+', u'5.0012') == u'26.1212\n'
        assert self._run(u'100', u'-', u'99.12') == u'0.88\n'
        assert self._run(u'12.332', u'*', u'5.32') == u'65.60624\n'
        assert self._run(u'10', u'/', u'3') == u'3.' + u'3' * 25 + u'\n'
        assert self._run(u'-5', u'x', u'2') == u'-10\n'
        # left to right
        assert self._run(u'2', u'+', u'3', u'X', u'4', u'-', u'1') == u'19\n'

    def test_single_operand(self):
        """A single operand is printed in canonical form."""
        assert self._run(u'0012.50') == u'12.5\n'
        assert self._run(u'1.5e3') == u'1500\n'

    def test_comparison(self):
        """Comparisons print True or False."""
        assert self._run(u'1', u'<', u'2') == u'True\n'
        assert self._run(u'2', u'<=', u'1') == u'False\n'
        assert self._run(u'1.0', u'==', u'1') == u'True\n'
        assert self._run(u'1.0', u'!=', u'1') == u'False\n'
        assert self._run(u'-1', u'>=', u'-1') == u'True\n'
        assert self._run(u'-1', u'>', u'-0.5') == u'False\n'

    def test_options(self):
        """Precision, scale and conversion."""
        assert self._run(u'--precision=5', u'1', u'/', u'3') == u'0.33333\n'
        assert self._run(u'--scale=2', u'1.5') == u'150\n'
        assert self._run(u'--scale=-3', u'1.5') == u'0.0015\n'
        assert self._run(u'--convert=int', u'-7.9') == u'-7\n'
        assert self._run(u'--convert=int', u'--bits=8', u'255') == u'-1\n'
        assert self._run(u'--convert=float', u'0.5') == u'0.5\n'

    def test_errors(self):
        """Errors are logged and exit with status 1."""
        self._fails(u'1', u'/', u'0')
        self._fails(u'1', u'+')
        self._fails(u'1', u'%', u'2')
        self._fails(u'1', u'<', u'2', u'<', u'3')
        self._fails(u'abc')
        with io.open(self.output_path(u'log.txt'), 'r', encoding='utf-8') as f:
            assert u'Non-numerical character' in f.read()

    def test_evaluate(self):
        """Evaluate token sequences."""
        values = Values(division_digits=3)
        assert evaluate([u'1', u'/', u'3'], values).to_str() == u'0.333'
        assert evaluate([u'3', u'>', u'2'], values) is True
        with self.assertRaises(error.ExpressionError) as cm:
            evaluate([], values)
        assert cm.exception.code == error.MISSING_OPERAND
        with self.assertRaises(error.ExpressionError) as cm:
            evaluate([u'1', u'^', u'2'], values)
        assert cm.exception.code == error.BAD_OPERATOR
        assert cm.exception.token == u'^'
        assert cm.exception.pos == 1


if __name__ == '__main__':
    run_tests()
