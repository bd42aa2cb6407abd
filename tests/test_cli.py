import io
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

import xmlrunner
from ddt import data, ddt

from chexdump import make_basename
from chexdump.cli import main


@ddt
class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.infile = os.path.join(self.tmpdir, "data.bin")
        with open(self.infile, "wb") as f:
            f.write(b"\x01\x02\x03")

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def run_main(self, *argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = main(list(argv))
        return code, stdout.getvalue(), stderr.getvalue()

    def testCSource(self):
        code, out, err = self.run_main("-name", "blob", "c-source", self.infile)
        self.assertEqual(code, 0)
        self.assertEqual(out, "uint8_t blob[3] = {\n0x01,0x02,0x03,\n};\n")
        self.assertEqual(err, "")

    def testDoubleDashSpellings(self):
        code, out, _ = self.run_main("--wordsize", "4", "--name", "blob", "c-extern", self.infile)
        self.assertEqual(code, 0)
        self.assertEqual(out, "extern uint32_t blob[1];\nstatic const size_t blob_SIZE = 3;\n")

    def testDefaultNameFromPath(self):
        code, out, _ = self.run_main("-caps", "-prefix", "g_", "c-extern", self.infile)
        self.assertEqual(code, 0)
        name = make_basename(self.infile, "g_", True)
        self.assertTrue(name.endswith("_DATA_BIN"))
        self.assertEqual(out, f"extern uint8_t {name}[3];\nstatic const size_t {name}_SIZE = 3;\n")

    def testLong(self):
        code, out, _ = self.run_main("-wordsize", "8", "long", self.infile)
        self.assertEqual(code, 0)
        self.assertEqual(out, "010203")

    def testOutputFile(self):
        target = os.path.join(self.tmpdir, "data.zig")
        code, out, _ = self.run_main("-name", "d", "-o", target, "zig", self.infile)
        self.assertEqual(code, 0)
        self.assertEqual(out, "")
        with open(target) as f:
            self.assertEqual(f.read(), "const d [3]u8 = {\n0x01,0x02,0x03,\n};\n")

    @data("3", "0", "sixteen")
    def testUnsupportedWordSize(self, value):
        code, out, err = self.run_main("-wordsize", value, "c-source", self.infile)
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn(f"Unsupported word size {value}", err)

    def testUnknownFormat(self):
        code, out, err = self.run_main("rust", self.infile)
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Unrecognised format: rust", err)

    @data("c-source", "c-extern")
    def testMissingInput(self, fmt):
        code, out, err = self.run_main(fmt, os.path.join(self.tmpdir, "missing.bin"))
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertTrue(err.startswith("error: "))

    def testTooFewArguments(self):
        with self.assertRaises(SystemExit) as cm:
            self.run_main("c-source")
        self.assertEqual(cm.exception.code, 1)

    def testUnrecognisedOption(self):
        with self.assertRaises(SystemExit) as cm:
            self.run_main("-bogus", "c-source", self.infile)
        self.assertEqual(cm.exception.code, 1)

    def testHelpListsFormats(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout), self.assertRaises(SystemExit) as cm:
            main(["-h"])
        self.assertEqual(cm.exception.code, 0)
        text = stdout.getvalue()
        self.assertIn("\tc-extern: C header extern declaration\n", text)
        self.assertIn("\tzig: Zig array", text)


if __name__ == '__main__':
    unittest.main(verbosity=2, testRunner=xmlrunner.XMLTestRunner(output='test-reports'))
