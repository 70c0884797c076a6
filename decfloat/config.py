"""
decfloat - config.py
Configuration file and command-line options parser

(c) 2013--2024 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import os
import io
import sys
import logging
import configparser
from collections import deque

from .data import NAME
from .values import numbers


# user configuration directory
HOME_DIR = os.path.expanduser(u'~')
if sys.platform == 'win32':
    USER_CONFIG_HOME = os.getenv(u'APPDATA', default=u'')
elif sys.platform == 'darwin':
    USER_CONFIG_HOME = os.path.join(HOME_DIR, u'Library', u'Application Support')
else:
    USER_CONFIG_HOME = os.environ.get(u'XDG_CONFIG_HOME') or os.path.join(HOME_DIR, u'.config')
USER_CONFIG_DIR = os.path.join(USER_CONFIG_HOME, NAME)

# default config file name
CONFIG_NAME = u'decfloat.ini'

# user config file
USER_CONFIG_PATH = os.path.join(USER_CONFIG_DIR, CONFIG_NAME)

# section of the config file we read
CONFIG_SECTION = u'decfloat'

# format for log files
LOGGING_FORMAT = u'[%(asctime)s.%(msecs)04d] %(levelname)s: %(message)s'
LOGGING_FORMATTER = logging.Formatter(fmt=LOGGING_FORMAT, datefmt=u'%H:%M:%S')

# bool strings
TRUES = (u'YES', u'TRUE', u'ON', u'1')
FALSES = (u'NO', u'FALSE', u'OFF', u'0')

# short-form arguments
SHORT_ARGS = {
    u'd': u'debug',
    u'h': u'help',
    u'v': u'version',
}

# all long-form arguments
ARGUMENTS = {
    u'precision': {
        u'type': u'int', u'default': numbers.DIVISION_DIGITS,
        u'check': lambda arg: arg >= 1,
    },
    u'scale': {u'type': u'int', u'default': 0},
    u'convert': {u'type': u'string', u'choices': (u'str', u'int', u'float'), u'default': u'str'},
    u'bits': {u'type': u'int', u'default': None, u'check': lambda arg: arg >= 1},
    u'logfile': {u'type': u'string', u'default': u''},
    u'debug': {u'type': u'bool', u'default': False},
    u'help': {u'type': u'bool', u'default': False},
    u'version': {u'type': u'bool', u'default': False},
}


##########################################################################
# logging

class Lumberjack(object):
    """Logging manager."""

    def __init__(self):
        """Set up the global logger temporarily until we know the log stream."""
        # include messages from warnings module in the logs
        logging.captureWarnings(True)
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)
        # send to a buffer until we know where to log to
        self._logstream = io.StringIO()
        handler = logging.StreamHandler(self._logstream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)

    def reset(self):
        """Reset root logger."""
        root_logger = logging.getLogger()
        # remove all old handlers: temporary ones we set as well as any default ones
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
        return root_logger

    def prepare(self, logfile, debug):
        """Set up the global logger."""
        loglevel = logging.DEBUG if debug else logging.INFO
        root_logger = self.reset()
        root_logger.setLevel(loglevel)
        if logfile:
            logstream = io.open(logfile, 'w', encoding='utf_8', errors='replace')
        else:
            logstream = sys.stderr
        # write out cached logs
        logstream.write(self._logstream.getvalue())
        handler = logging.StreamHandler(logstream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)


##############################################################################
# settings container

class Settings(object):
    """Read and retrieve command-line settings and options."""

    def __init__(self, arguments=()):
        """Initialise settings."""
        if not arguments:
            self._uargv = sys.argv[1:]
        else:
            self._uargv = list(arguments)
        lumberjack = Lumberjack()
        try:
            self._options, self._positional = ArgumentParser().retrieve_options(self._uargv)
        except Exception:
            # avoid losing exception messages occuring while logging was disabled
            lumberjack.reset()
            raise
        # prepare global logger for use by main program
        lumberjack.prepare(self.get('logfile'), self.get('debug'))

    def get(self, name, get_default=True):
        """Get value of option; choose whether to get default or None (unspecified)."""
        try:
            value = self._options[name]
            if get_default and (value is None or value == u''):
                raise KeyError(name)
        except KeyError:
            if get_default:
                return ARGUMENTS[name][u'default']
            return None
        return value

    @property
    def values_params(self):
        """Keyword arguments for Values."""
        return dict(division_digits=self.get('precision'))

    @property
    def operands(self):
        """Positional arguments: operands and operators."""
        return list(self._positional)

    @property
    def scale(self):
        """Power of ten to multiply the result by."""
        return self.get('scale')

    @property
    def convert(self):
        """Output type."""
        return self.get('convert')

    @property
    def bits(self):
        """Width for integer output, or None for unbounded."""
        return self.get('bits')

    @property
    def version(self):
        """Version operating mode."""
        return self.get('version')

    @property
    def help(self):
        """Help operating mode."""
        return self.get('help')

    @property
    def debug(self):
        """Debugging mode."""
        return self.get('debug')


##############################################################################
# argument parsing

class ArgumentParser(object):
    """Parse decfloat config file and command-line arguments."""

    def retrieve_options(self, uargv):
        """Retrieve command line and config file options; return options and positionals."""
        remaining, positional = self._get_arguments_dict(uargv)
        # config file settings
        args = self._parse_config_arg_and_process_config_file(remaining)
        unrecognised = [(_k, _v) for _k, _v in args.items() if _k not in ARGUMENTS]
        for key, value in unrecognised:
            logging.warning(
                'Ignored unrecognised option `%s=%s` in configuration file', key, value
            )
            del args[key]
        # command-line args override config file settings
        args.update(self._parse_args(remaining))
        self._convert_types(args)
        return args, positional

    def _get_arguments_dict(self, argv):
        """Convert command-line arguments to dictionary and list of positionals."""
        args = {}
        positional = []
        arg_deque = deque(argv)
        # use -- to end option parsing, everything is a positional argument afterwards
        options_ended = False
        while arg_deque:
            arg = arg_deque.popleft()
            # negative numbers and the minus operator are not options
            if options_ended or not arg.startswith(u'-') or arg[1:2] in u'0123456789.':
                positional.append(arg)
            elif arg == u'--':
                options_ended = True
            elif arg.startswith(u'--'):
                key, _, value = arg[2:].partition(u'=')
                if key:
                    args[key] = value
            else:
                for short_arg in arg[1:]:
                    try:
                        args[SHORT_ARGS[short_arg]] = u''
                    except KeyError:
                        logging.warning(u'Ignored unrecognised option `-%s`', short_arg)
        return args, positional

    def _parse_config_arg_and_process_config_file(self, remaining):
        """Find the correct config file and read it."""
        # private config file, overridden by local or specified one
        conf_dict = self._read_config_file(USER_CONFIG_PATH)
        config_file = None
        try:
            config_file = remaining.pop(u'config')
        except KeyError:
            if os.path.exists(CONFIG_NAME):
                config_file = CONFIG_NAME
        if config_file:
            conf_dict.update(self._read_config_file(config_file, required=True))
        return conf_dict

    def _read_config_file(self, config_file, required=False):
        """Read the decfloat section of a config file."""
        if not required and not os.path.exists(config_file):
            return {}
        try:
            config = configparser.RawConfigParser(allow_no_value=True)
            # use utf_8_sig to ignore a BOM if it's at the start of the file
            with io.open(config_file, 'r', encoding='utf_8_sig', errors='replace') as f:
                config.read_file(_line.lstrip(u' \t') for _line in f)
        except (configparser.Error, IOError):
            logging.warning(
                u'Error in configuration file `%s`. Configuration not loaded.', config_file
            )
            return {}
        if not config.has_section(CONFIG_SECTION):
            return {}
        # options without a value are switched on
        return {_k: (_v or u'') for _k, _v in config.items(CONFIG_SECTION)}

    def _parse_args(self, remaining):
        """Process command line options."""
        args = {_k: _v for _k, _v in remaining.items() if _k in ARGUMENTS}
        for key in remaining:
            if key not in ARGUMENTS:
                logging.warning(u'Ignored unrecognised command-line argument `%s`', key)
        return args

    def _convert_types(self, args):
        """Convert arguments to required type."""
        for name in args:
            args[name] = self._parse_type(name, args[name])

    ##########################################################################
    # type conversions

    def _parse_type(self, d, arg):
        """Convert argument to required type."""
        if u'choices' in ARGUMENTS[d]:
            arg = arg.lower()
        if ARGUMENTS[d][u'type'] == u'int':
            arg = self._to_int(d, arg)
        elif ARGUMENTS[d][u'type'] == u'bool':
            arg = self._to_bool(d, arg)
        if u'choices' in ARGUMENTS[d]:
            if arg and arg not in ARGUMENTS[d][u'choices']:
                logging.warning(
                    u'Value `%s=%s` ignored; should be one of (`%s`)',
                    d, arg, u'`, `'.join(ARGUMENTS[d][u'choices'])
                )
                arg = u''
        if u'check' in ARGUMENTS[d]:
            if arg is not None and not ARGUMENTS[d][u'check'](arg):
                logging.warning(u'Value `%s=%s` ignored; out of range', d, arg)
                arg = None
        return arg

    def _to_bool(self, argname, strval):
        """Convert bool string to bool. Empty string (i.e. specified) means True."""
        if strval == u'':
            return True
        if strval.upper() in TRUES:
            return True
        elif strval.upper() in FALSES:
            return False
        else:
            logging.warning(
                u'Boolean option `%s=%s` interpreted as `%s=True`',
                argname, strval, argname
            )
        return True

    def _to_int(self, argname, strval):
        """Convert int string to int."""
        if strval:
            try:
                return int(strval)
            except ValueError:
                logging.warning(
                    u'Option `%s=%s` ignored: value should be an integer',
                    argname, strval
                )
        return None
