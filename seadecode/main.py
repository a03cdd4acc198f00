"""
SEA decoder - main.py
Command-line interface

(c) 2013--2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import io
import os
import sys
import logging

from . import config
from .data import NAME, VERSION, COPYRIGHT, read_text
from .base.error import SeaError
from .sea import decode_sea_stream


def main(*arguments):
    """Initialise, parse arguments and perform requested operations."""
    settings = config.Settings(arguments)
    if settings.version:
        # print version and exit
        _show_version()
    elif settings.help:
        # print usage and exit
        _show_usage()
    else:
        try:
            _convert(**settings.conv_params)
        except (SeaError, EnvironmentError) as e:
            logging.error(u'%s', e)
            sys.exit(1)


def _show_usage():
    """Show usage description."""
    sys.stdout.write(read_text('USAGE.txt'))

def _show_version():
    """Show version and copyright."""
    sys.stdout.write(u'%s %s\n%s\n' % (NAME, VERSION, COPYRIGHT))

def _convert(infile, outfile, name, chunk_size, report_checksum):
    """Decode a .sea file."""
    if infile in (None, u'-'):
        infile = None
        if not name:
            raise SeaError(u'A file name is needed to decode standard input; use --name')
    elif not name:
        name = os.path.basename(infile)
    if infile and outfile and os.path.exists(outfile) and os.path.samefile(infile, outfile):
        raise SeaError(u'Output file `%s` is the input file' % (outfile,))
    # decode completely before the output file is created
    decoded = io.BytesIO()
    if infile:
        with io.open(infile, 'rb') as instream:
            checksum = decode_sea_stream(name, instream, decoded, chunk_size=chunk_size)
    else:
        checksum = decode_sea_stream(name, sys.stdin.buffer, decoded, chunk_size=chunk_size)
    if outfile:
        with io.open(outfile, 'wb') as outstream:
            outstream.write(decoded.getvalue())
    else:
        sys.stdout.buffer.write(decoded.getvalue())
        sys.stdout.buffer.flush()
    logging.debug(u'Decoded `%s` with key name `%s`', infile or u'<stdin>', name)
    if report_checksum:
        sys.stderr.write(u'stored checksum: 0x%08X\n' % (checksum,))
