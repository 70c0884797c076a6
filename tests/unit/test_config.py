"""
decfloat tests.test_config
unit tests for settings and options

(c) 2020--2024 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import io
import logging

from decfloat import config
from tests.unit.utils import TestCase, run_tests


class ConfigTest(TestCase):
    """Unit tests for config module."""

    tag = u'config'

    def tearDown(self):
        """Detach the log file handlers set up by Settings."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            handler.flush()
            root_logger.removeHandler(handler)

    def _settings(self, *args):
        """Settings with logging to the output directory."""
        return config.Settings((u'--logfile=%s' % self.output_path(u'log.txt'),) + args)

    def _log(self):
        """Contents of the log so far."""
        for handler in logging.getLogger().handlers:
            handler.flush()
        with io.open(self.output_path(u'log.txt'), 'r', encoding='utf-8') as f:
            return f.read()

    def _write_config(self, text):
        """Write a config file and return its name."""
        name = self.output_path(u'decfloat.ini')
        with io.open(name, 'w', encoding='utf-8') as f:
            f.write(text)
        return name

    def test_defaults(self):
        """Options take default values."""
        settings = self._settings(u'1')
        assert settings.values_params == {'division_digits': 25}
        assert settings.scale == 0
        assert settings.convert == u'str'
        assert settings.bits is None
        assert not settings.debug
        assert not settings.help
        assert not settings.version
        assert settings.get('bits', get_default=False) is None

    def test_options(self):
        """Long options with values."""
        settings = self._settings(
            u'--precision=10', u'--scale=-2', u'--convert=INT', u'--bits=16', u'--debug'
        )
        assert settings.values_params == {'division_digits': 10}
        assert settings.scale == -2
        assert settings.convert == u'int'
        assert settings.bits == 16
        assert settings.debug

    def test_short_options(self):
        """Short options and combined short options."""
        assert self._settings(u'-h').help
        assert self._settings(u'-v').version
        settings = self._settings(u'-dh')
        assert settings.debug
        assert settings.help

    def test_bool(self):
        """Boolean option values."""
        assert self._settings(u'--debug=yes').debug
        assert not self._settings(u'--debug=off').debug
        assert self._settings(u'--debug=maybe').debug
        assert u'interpreted as `debug=True`' in self._log()

    def test_invalid_values(self):
        """Invalid values are logged and ignored."""
        settings = self._settings(u'--precision=many', u'--convert=decimal', u'--bits=0')
        assert settings.values_params == {'division_digits': 25}
        assert settings.convert == u'str'
        assert settings.bits is None
        log = self._log()
        assert u'value should be an integer' in log
        assert u'should be one of' in log
        assert u'out of range' in log

    def test_precision_minimum(self):
        """Division precision is at least one digit."""
        assert self._settings(u'--precision=0').values_params == {'division_digits': 25}
        assert self._settings(u'--precision=1').values_params == {'division_digits': 1}

    def test_unrecognised(self):
        """Unknown options are logged and ignored."""
        settings = self._settings(u'--frobnicate=1', u'-q')
        assert settings.get('precision') == 25
        log = self._log()
        assert u'frobnicate' in log
        assert u'-q' in log

    def test_positional(self):
        """Operands and operators, including negative numbers."""
        settings = self._settings(u'1', u'+', u'-2.5', u'-', u'-.5', u'x', u'3')
        assert settings.operands == [u'1', u'+', u'-2.5', u'-', u'-.5', u'x', u'3']

    def test_end_of_options(self):
        """Everything after -- is positional."""
        settings = self._settings(u'--', u'-e5')
        assert settings.operands == [u'-e5']

    def test_config_file(self):
        """Options from the config file; command line overrides."""
        name = self._write_config(
            u'[decfloat]\n'
            u'  precision=12\n'
            u'convert=float\n'
            u'debug\n'
        )
        settings = self._settings(u'--config=%s' % name)
        assert settings.values_params == {'division_digits': 12}
        assert settings.convert == u'float'
        assert settings.debug
        settings = self._settings(u'--config=%s' % name, u'--precision=40')
        assert settings.values_params == {'division_digits': 40}

    def test_config_file_unknown(self):
        """Unknown keys and other sections in the config file."""
        name = self._write_config(
            u'[decfloat]\n'
            u'colour=blue\n'
            u'[other]\n'
            u'precision=3\n'
        )
        settings = self._settings(u'--config=%s' % name)
        assert settings.values_params == {'division_digits': 25}
        assert u'colour=blue' in self._log()

    def test_config_file_errors(self):
        """Missing or malformed config files are logged."""
        settings = self._settings(u'--config=%s' % self.output_path(u'missing.ini'))
        assert settings.values_params == {'division_digits': 25}
        name = self._write_config(u'precision=3\n')
        settings = self._settings(u'--config=%s' % name)
        assert settings.values_params == {'division_digits': 25}
        assert u'Configuration not loaded' in self._log()


if __name__ == '__main__':
    run_tests()
