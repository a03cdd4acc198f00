"""
SEA decoder tests.test_main
unit tests for main script

(c) 2026 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import io
import os
import sys
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

from seadecode import main, NAME, VERSION

from tests.unit.utils import TestCase, run_tests


# body decodes to 2f b3 04 d5 under TEST.SC4
GOLDEN = b'\x12\x34\x56\x78\x01\x00\x00\x00'


class MainTest(TestCase):
    """Unit tests for main script."""

    tag = u'main'

    def test_version(self):
        """Test version call."""
        output = io.StringIO()
        with redirect_stdout(output):
            main('-v')
        assert output.getvalue().startswith(u'%s %s\n' % (NAME, VERSION)), output.getvalue()

    def test_usage(self):
        """Test usage call."""
        output = io.StringIO()
        with redirect_stdout(output):
            main('-h')
        assert output.getvalue().startswith(u'SYNOPSIS'), output.getvalue()

    def test_decode_file(self):
        """Decode a file to a file, key from the file name."""
        infile = self.write_file(u'TEST.SC4', GOLDEN)
        outfile = self.output_path(u'TEST.DAT')
        main(infile, outfile)
        with open(outfile, 'rb') as f:
            assert f.read() == b'\x2f\xb3\x04\xd5'

    def test_decode_with_name(self):
        """Decode a renamed file."""
        infile = self.write_file(u'renamed.sea', GOLDEN)
        outfile = self.output_path(u'out.dat')
        main(u'--name=TEST.SC4', infile, outfile)
        with open(outfile, 'rb') as f:
            assert f.read() == b'\x2f\xb3\x04\xd5'

    def test_decode_small_chunks(self):
        """Chunk size does not change the output."""
        infile = self.write_file(u'TEST.SC4', GOLDEN)
        outfile = self.output_path(u'TEST.DAT')
        main(u'--chunk-size=1', infile, outfile)
        with open(outfile, 'rb') as f:
            assert f.read() == b'\x2f\xb3\x04\xd5'

    def test_checksum_report(self):
        """Stored checksum is reported on request."""
        infile = self.write_file(u'TEST.SC4', GOLDEN)
        outfile = self.output_path(u'TEST.DAT')
        errors = io.StringIO()
        with redirect_stderr(errors):
            main(u'--checksum', infile, outfile)
        assert u'stored checksum: 0x00000001' in errors.getvalue()

    def test_stdio(self):
        """Decode standard input to standard output."""
        stdin = io.TextIOWrapper(io.BytesIO(GOLDEN))
        stdout = io.TextIOWrapper(io.BytesIO())
        with mock.patch.object(sys, 'stdin', stdin), mock.patch.object(sys, 'stdout', stdout):
            main(u'-n', u'TEST.SC4')
            output = stdout.buffer.getvalue()
        assert output == b'\x2f\xb3\x04\xd5'

    def test_stdin_without_name(self):
        """Standard input needs an explicit name."""
        logfile = self.output_path(u'log.txt')
        with self.assertRaises(SystemExit) as cm:
            main(u'-', u'--logfile=' + logfile)
        assert cm.exception.code == 1
        with open(logfile) as f:
            assert u'--name' in f.read()

    def test_missing_file(self):
        """Missing input file is an error."""
        logfile = self.output_path(u'log.txt')
        with self.assertRaises(SystemExit) as cm:
            main(self.output_path(u'NOSUCH.SEA'), u'--logfile=' + logfile)
        assert cm.exception.code == 1
        with open(logfile) as f:
            assert u'ERROR' in f.read()

    def test_short_file(self):
        """Too-short input is an error."""
        infile = self.write_file(u'SHORT.SEA', b'\x01\x02')
        logfile = self.output_path(u'log.txt')
        with self.assertRaises(SystemExit) as cm:
            main(infile, self.output_path(u'SHORT.DAT'), u'--logfile=' + logfile)
        assert cm.exception.code == 1
        with open(logfile) as f:
            assert u'too short' in f.read()

    def test_same_input_output(self):
        """Decoding a file onto itself is refused and leaves it intact."""
        infile = self.write_file(u'TEST.SC4', GOLDEN)
        logfile = self.output_path(u'log.txt')
        with self.assertRaises(SystemExit) as cm:
            main(infile, infile, u'--logfile=' + logfile)
        assert cm.exception.code == 1
        with open(infile, 'rb') as f:
            assert f.read() == GOLDEN
        with open(logfile) as f:
            assert u'is the input file' in f.read()

    def test_short_file_no_output(self):
        """No output file is created when decoding fails."""
        infile = self.write_file(u'SHORT.SEA', b'\x01\x02')
        outfile = self.output_path(u'SHORT.DAT')
        with self.assertRaises(SystemExit):
            main(infile, outfile, u'--logfile=' + self.output_path(u'log.txt'))
        assert not os.path.exists(outfile)

    def test_existing_output_kept_on_failure(self):
        """An existing output file is not truncated when decoding fails."""
        infile = self.write_file(u'SHORT.SEA', b'\x01\x02')
        outfile = self.write_file(u'KEEP.DAT', b'previous contents')
        with self.assertRaises(SystemExit):
            main(infile, outfile, u'--logfile=' + self.output_path(u'log.txt'))
        with open(outfile, 'rb') as f:
            assert f.read() == b'previous contents'

    def test_startup_warning_logged(self):
        """Warnings from option parsing are in the log file right after the run."""
        infile = self.write_file(u'TEST.SC4', GOLDEN)
        logfile = self.output_path(u'log.txt')
        main(u'--bogus', u'--logfile=' + logfile, infile, self.output_path(u'TEST.DAT'))
        with open(logfile) as f:
            assert u'bogus' in f.read()

    def test_debug_log(self):
        """Debug logging records the key and checksum."""
        infile = self.write_file(u'TEST.SC4', GOLDEN)
        logfile = self.output_path(u'log.txt')
        main(u'-d', u'--logfile=' + logfile, infile, self.output_path(u'TEST.DAT'))
        with open(logfile) as f:
            log = f.read()
        assert u'DEBUG' in log
        assert u'seed0=0x63D7195C' in log
        assert u'0x00000001' in log


if __name__ == '__main__':
    run_tests()
