"""
SEA decoder - config.py
Configuration file and command-line options

(c) 2013--2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.

Options are read from the [seadecode] section of the user's SEADECODE.INI, then from
a local SEADECODE.INI or the file given with --config, then from the command line.
Later sources override earlier ones.
"""

import os
import io
import sys
import logging
import platform
import configparser

from .data import NAME


# user configuration directory
if platform.system() == 'Windows':
    USER_CONFIG_HOME = os.getenv(u'APPDATA', default=u'')
elif platform.system() == 'Darwin':
    USER_CONFIG_HOME = os.path.join(os.path.expanduser(u'~'), u'Library', u'Application Support')
else:
    USER_CONFIG_HOME = (
        os.environ.get(u'XDG_CONFIG_HOME') or os.path.join(os.path.expanduser(u'~'), u'.config')
    )

CONFIG_NAME = u'SEADECODE.INI'
USER_CONFIG_PATH = os.path.join(USER_CONFIG_HOME, NAME, CONFIG_NAME)
CONFIG_SECTION = u'seadecode'

# format for log files
LOGGING_FORMAT = u'[%(asctime)s.%(msecs)04d] %(levelname)s: %(message)s'
LOGGING_FORMATTER = logging.Formatter(fmt=LOGGING_FORMAT, datefmt=u'%H:%M:%S')

TRUES = (u'YES', u'TRUE', u'ON', u'1')
FALSES = (u'NO', u'FALSE', u'OFF', u'0')

# option name: (type, default)
OPTIONS = {
    u'help': (bool, False),
    u'version': (bool, False),
    u'debug': (bool, False),
    u'checksum': (bool, False),
    u'logfile': (str, u''),
    u'config': (str, u''),
    u'name': (str, u''),
    u'chunk-size': (int, 0x10000),
}

SHORT_OPTIONS = {
    u'h': u'help',
    u'v': u'version',
    u'd': u'debug',
    u'n': u'name',
    u'l': u'logfile',
    u'c': u'config',
}

# infile, outfile
NUM_POSITIONAL = 2


##########################################################################
# logging

class Lumberjack(object):
    """Logging manager."""

    def __init__(self):
        """Buffer log records until we know the log stream."""
        logging.captureWarnings(True)
        self._buffer = io.StringIO()
        root_logger = self.reset()
        root_logger.setLevel(logging.INFO)
        handler = logging.StreamHandler(self._buffer)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)

    def reset(self):
        """Remove all handlers from the root logger."""
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        return root_logger

    def prepare(self, logfile, debug):
        """Send logs to file or stderr, starting with the buffered records."""
        root_logger = self.reset()
        root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
        if logfile:
            logstream = io.open(logfile, 'w', encoding='utf_8', errors='replace')
        else:
            logstream = sys.stderr
        logstream.write(self._buffer.getvalue())
        logstream.flush()
        handler = logging.StreamHandler(logstream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)


##############################################################################
# parsing

def parse_command_line(argv):
    """Split command line into a dict of option strings and a list of positional arguments."""
    options, positional = {}, []
    args = list(argv)
    while args:
        arg = args.pop(0)
        if arg == u'--':
            positional.extend(args)
            break
        elif arg.startswith(u'--'):
            key, _, value = arg[2:].partition(u'=')
            options[key] = value
        elif arg.startswith(u'-') and arg != u'-':
            cluster, sep, value = arg[1:].partition(u'=')
            for i, char in enumerate(cluster):
                try:
                    key = SHORT_OPTIONS[char]
                except KeyError:
                    logging.warning(u'Ignored unrecognised option `-%s`', char)
                    continue
                if OPTIONS[key][0] is bool:
                    options[key] = u''
                elif i < len(cluster) - 1:
                    # a value option in the middle of a cluster takes the rest as its value
                    options[key] = cluster[i+1:]
                    break
                elif sep:
                    options[key] = value
                elif args and not args[0].startswith(u'-'):
                    options[key] = args.pop(0)
                else:
                    options[key] = u''
        else:
            positional.append(arg)
    return options, positional


def read_config_file(config_file):
    """Read the options section of a config file; return a dict of option strings."""
    config = configparser.RawConfigParser(allow_no_value=True)
    try:
        # utf_8_sig skips a BOM, as written by Notepad
        with io.open(config_file, 'r', encoding='utf_8_sig', errors='replace') as f:
            config.read_string(u''.join(_line.lstrip(u' \t') for _line in f))
    except (configparser.Error, EnvironmentError):
        logging.warning(
            u'Error in configuration file `%s`. Configuration not loaded.', config_file
        )
        return {}
    if not config.has_section(CONFIG_SECTION):
        return {}
    # options without a value are flags
    return {
        _key: (u'' if _value is None else _value)
        for _key, _value in config.items(CONFIG_SECTION)
    }


def convert_option(name, value):
    """Convert option string to its type; None if invalid."""
    kind = OPTIONS[name][0]
    if kind is bool:
        if value == u'' or value.upper() in TRUES:
            return True
        if value.upper() in FALSES:
            return False
        logging.warning(u'Boolean option `%s=%s` interpreted as `%s=True`', name, value, name)
        return True
    if kind is int:
        try:
            number = int(value)
        except ValueError:
            number = 0
        if number > 0:
            return number
        logging.warning(u'Option `%s=%s` ignored: should be a positive integer', name, value)
        return None
    return value or None


##############################################################################
# settings container

class Settings(object):
    """Options from config files and command line."""

    def __init__(self, arguments):
        """Parse options and set up logging."""
        lumberjack = Lumberjack()
        try:
            options, positional = parse_command_line(arguments or sys.argv[1:])
            self._options = self._merge(options)
        except BaseException:
            # do not leave logs stuck in the buffer
            lumberjack.reset()
            raise
        for i, arg in enumerate(positional[NUM_POSITIONAL:], NUM_POSITIONAL):
            logging.warning(u'Ignored surplus positional command-line argument #%d: `%s`', i, arg)
        self._positional = (positional + [None] * NUM_POSITIONAL)[:NUM_POSITIONAL]
        lumberjack.prepare(self.get('logfile'), self.get('debug'))

    def _merge(self, cmdline):
        """Combine config files and command line; convert types."""
        merged = {}
        if os.path.exists(USER_CONFIG_PATH):
            merged.update(read_config_file(USER_CONFIG_PATH))
        config_file = cmdline.pop(u'config', None)
        if config_file is None and os.path.exists(CONFIG_NAME):
            config_file = CONFIG_NAME
        if config_file:
            merged.update(read_config_file(config_file))
        merged.update(cmdline)
        converted = {}
        for name, value in merged.items():
            if name not in OPTIONS:
                logging.warning(u'Ignored unrecognised option `%s=%s`', name, value)
                continue
            converted[name] = convert_option(name, value)
        return converted

    def get(self, name):
        """Value of option, or its default if unset or invalid."""
        value = self._options.get(name)
        if value is None:
            return OPTIONS[name][1]
        return value

    @property
    def conv_params(self):
        """Parameters for file decoding."""
        infile, outfile = self._positional
        return {
            'infile': infile,
            'outfile': outfile,
            'name': self.get('name') or None,
            'chunk_size': self.get('chunk-size'),
            'report_checksum': self.get('checksum'),
        }

    @property
    def version(self):
        return self.get('version')

    @property
    def help(self):
        return self.get('help')
