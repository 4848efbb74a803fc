"""
sharc - CLI Test Suite
Exit codes and terminal output of the command-line entry point.
"""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from sharc import __version__
from sharc.cli import HELP_MESSAGE, USAGE, get_args, main
from sharc.report import Level, report_error


def run(*argv):
    """Run get_args, returning (exit code or None, args or None, stdout, stderr)."""
    out, err = io.StringIO(), io.StringIO()
    code, args = None, None
    with redirect_stdout(out), redirect_stderr(err):
        try:
            args = get_args(list(argv))
        except SystemExit as e:
            code = e.code
    return code, args, out.getvalue(), err.getvalue()


class TestGetArgs(unittest.TestCase):

    def test_success_returns_args(self):
        code, args, out, err = run("-f", "a.shd", "build")
        self.assertIsNone(code)
        self.assertEqual(args.file.value, "a.shd")
        self.assertEqual(args.verbs, ["build"])
        self.assertEqual(out, "")
        self.assertEqual(err, "")

    def test_short_help(self):
        code, _, out, _ = run("-h")
        self.assertEqual(code, 0)
        self.assertEqual(out, USAGE + "\n")

    def test_long_help(self):
        code, _, out, _ = run("--help")
        self.assertEqual(code, 0)
        self.assertEqual(out, f"{USAGE}\n\n{HELP_MESSAGE}\n")
        self.assertIn("--error-level LEVEL", out)

    def test_grouped_help_after_debug(self):
        code, _, out, _ = run("-dh")
        self.assertEqual(code, 0)
        self.assertEqual(out, USAGE + "\n")

    def test_version(self):
        for flag in ("-V", "--version"):
            code, _, out, _ = run(flag)
            self.assertEqual(code, 0)
            self.assertEqual(out, f"sharc {__version__}\n")

    def test_banner_exits_with_one(self):
        code, _, out, _ = run("shark")
        self.assertEqual(code, 1)
        self.assertIn("?88b", out)
        self.assertTrue(out.startswith("\x1b[34m"))

    def test_unrecognized_reports_once(self):
        code, _, out, err = run("--bogus")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertEqual(err.count("error[ArgumentParserError]"), 1)
        self.assertIn("unrecognized argument --bogus", err)
        self.assertIn("for usage information", err)

    def test_duplicate_reports(self):
        code, _, _, err = run("-d", "--debug")
        self.assertEqual(code, 1)
        self.assertIn("'--debug' may only be used once", err)

    def test_group_position_reports(self):
        code, _, _, err = run("-fo", "x")
        self.assertEqual(code, 1)
        self.assertIn("-f may only be used at the end of a group", err)

    def test_missing_value_reports(self):
        code, _, _, err = run("-o")
        self.assertEqual(code, 1)
        self.assertIn("-o expected FILE", err)

    def test_invalid_level_reports(self):
        code, _, _, err = run("-l", "loud")
        self.assertEqual(code, 1)
        self.assertIn("invalid level `loud`", err)


class TestMain(unittest.TestCase):

    def test_debug_logs_configuration(self):
        err = io.StringIO()
        with redirect_stderr(err):
            main(["-d", "-l", "note", "build"])
        log = err.getvalue()
        self.assertIn("[sharc] file:         'main.shd'", log)
        self.assertIn("[sharc] error level:  note", log)
        self.assertIn("['build']", log)

    def test_quiet_without_debug(self):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            main(["build"])
        self.assertEqual(out.getvalue(), "")
        self.assertEqual(err.getvalue(), "")

    def test_error_exits(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--nope"])
        self.assertEqual(ctx.exception.code, 1)


class TestReport(unittest.TestCase):

    def test_title_and_note(self):
        buf = io.StringIO()
        report_error("something broke", "try again", stream=buf)
        lines = buf.getvalue().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertIn("something broke", lines[0])
        self.assertEqual(lines[1], "  try again")

    def test_title_only(self):
        buf = io.StringIO()
        report_error("just a title", stream=buf)
        self.assertEqual(len(buf.getvalue().splitlines()), 1)

    def test_level_name_lookup(self):
        self.assertIs(Level.from_name("s"), Level.SILENT)


if __name__ == "__main__":
    unittest.main(verbosity=2)
