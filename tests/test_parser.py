"""
Input Parser Tests

Commands, options, arguments and redirect targets.
"""

import unittest

from shellsim.exceptions import (
    ExpansionError,
    GlobError,
    OptionError,
    RedirectError,
    TokenizeError,
)
from shellsim.filesystem import File, FileSystem, Path
from shellsim.shell import (
    Environment,
    InputArgs,
    InputParser,
    RedirectTarget,
    RedirectType,
    StandardStream,
)


class ParserTestCase(unittest.TestCase):
    """Shared set-up: a parser over a small file system."""

    def setUp(self):
        self.env = Environment(variables={"cwd": "/", "a": "b"})
        self.fs = FileSystem()
        self.fs.add(Path("/f1"), File())
        self.fs.add(Path("/f2"), File())
        self.parser = InputParser.create(self.env, self.fs)

    def parse_one(self, line):
        commands = self.parser.parse(line)
        self.assertEqual(len(commands), 1)
        return commands[0]


class TestCommands(ParserTestCase):
    """Test splitting lines into commands."""

    def test_single_command(self):
        """Test a bare command."""
        self.assertEqual(self.parse_one("cmd"), InputArgs("cmd"))

    def test_command_is_lowercased(self):
        """Test that command names are case-insensitive."""
        self.assertEqual(self.parse_one("CmD").command, "cmd")

    def test_empty_line(self):
        """Test that empty lines and lone separators have no commands."""
        self.assertEqual(self.parser.parse(""), [])
        self.assertEqual(self.parser.parse(" ; ;"), [])

    def test_separated_commands(self):
        """Test that empty commands between separators are dropped."""
        self.assertEqual(
            [args.command for args in self.parser.parse("a;;b ; c")],
            ["a", "b", "c"]
        )

    def test_command_from_variable(self):
        """Test that the command name is expanded too."""
        self.assertEqual(self.parse_one("$a x").command, "b")

    def test_tokenize_error(self):
        """Test that tokenizing errors reject the whole line."""
        with self.assertRaises(TokenizeError):
            self.parser.parse("a; b {c")
        with self.assertRaises(TokenizeError):
            self.parser.split("a; b {c")

    def test_split_defers_expansion(self):
        """Test that splitting does not expand words."""
        commands = self.parser.split("a; b z*")

        self.assertEqual(len(commands), 2)
        self.assertEqual(self.parser.parse_command(commands[0]).command, "a")
        with self.assertRaises(GlobError):
            self.parser.parse_command(commands[1])

    def test_later_command_sees_earlier_changes(self):
        """Test that each command is expanded against the current file system."""
        first, second = self.parser.split("touch; ls g*")
        self.parser.parse_command(first)
        self.fs.add(Path("/g1"), File())

        self.assertEqual(self.parser.parse_command(second).args, ["g1"])


class TestArguments(ParserTestCase):
    """Test positional arguments."""

    def test_arguments(self):
        """Test arguments in input order."""
        self.assertEqual(self.parse_one("cmd x y z").args, ["x", "y", "z"])

    def test_globbed_arguments(self):
        """Test that glob matches become separate arguments."""
        self.assertEqual(self.parse_one("cmd f*").args, ["f1", "f2"])

    def test_grouped_argument(self):
        """Test that braces and quotes keep spaces in one argument."""
        self.assertEqual(self.parse_one("cmd {a b} 'c d'").args, ["a b", "c d"])

    def test_empty_expansion_is_dropped(self):
        """Test that a word expanding to nothing is not an argument."""
        self.assertEqual(self.parse_one("cmd $undefined x").args, ["x"])
        self.assertEqual(self.parse_one("cmd \"$undefined\" x").args, ["", "x"])

    def test_expansion_error(self):
        """Test that expansion errors propagate."""
        with self.assertRaises(ExpansionError):
            self.parser.parse("cmd $")


class TestOptions(ParserTestCase):
    """Test option classification."""

    def test_options_and_values(self):
        """Test short options with and without values."""
        args = self.parse_one("cmd -o=1 -p arg1")

        self.assertEqual(args.options, {"o": "1", "p": None})
        self.assertEqual(args.args, ["arg1"])

    def test_grouped_short_options(self):
        """Test that '-abc' sets three flags."""
        self.assertEqual(self.parse_one("cmd -abc").options, {"a": None, "b": None, "c": None})

    def test_value_for_grouped_short_options(self):
        """Test that grouped short options cannot take a value."""
        with self.assertRaises(OptionError):
            self.parser.parse("cmd -ab=1")

    def test_long_options(self):
        """Test long options with and without values."""
        self.assertEqual(
            self.parse_one("cmd --long=value --flag").options,
            {"long": "value", "flag": None}
        )

    def test_empty_value(self):
        """Test that '=' with nothing after it is an empty value."""
        self.assertEqual(self.parse_one("cmd -o=").options, {"o": ""})

    def test_value_containing_equals(self):
        """Test that only the first '=' separates key and value."""
        self.assertEqual(self.parse_one("cmd --expr=a=b").options, {"expr": "a=b"})

    def test_double_dash_ends_options(self):
        """Test that '--' ends options and is dropped."""
        args = self.parse_one("cmd -- -p")

        self.assertEqual(args.options, {})
        self.assertEqual(args.args, ["-p"])

    def test_first_argument_ends_options(self):
        """Test that options after an argument are arguments."""
        args = self.parse_one("cmd -a x -b")

        self.assertEqual(args.options, {"a": None})
        self.assertEqual(args.args, ["x", "-b"])

    def test_numbers_are_arguments(self):
        """Test that a dash followed by a digit is an argument."""
        args = self.parse_one("cmd -1 -x")

        self.assertEqual(args.options, {})
        self.assertEqual(args.args, ["-1", "-x"])

    def test_key_with_space_is_argument(self):
        """Test that a quoted dash word with a space in its key is an argument."""
        self.assertEqual(self.parse_one("cmd '-a b'").args, ["-a b"])

    def test_lone_dash_is_argument(self):
        """Test that '-' on its own is an argument."""
        self.assertEqual(self.parse_one("cmd - x").args, ["-", "x"])

    def test_option_value_is_expanded(self):
        """Test that variables in option values are substituted."""
        self.assertEqual(self.parse_one("cmd --name=$a").options, {"name": "b"})


class TestRedirects(ParserTestCase):
    """Test redirect targets."""

    def test_write_redirect(self):
        """Test that '>' redirects the output stream."""
        args = self.parse_one("cmd -o=1 -p arg1 > out.txt")

        self.assertEqual(args.args, ["arg1"])
        self.assertEqual(
            args.redirect_targets,
            {1: RedirectTarget(RedirectType.WRITE, "out.txt")}
        )

    def test_append_redirect(self):
        """Test that '>>' appends."""
        self.assertEqual(
            self.parse_one("cmd >> log").get_redirect_target(),
            RedirectTarget(RedirectType.APPEND, "log")
        )

    def test_error_stream(self):
        """Test redirecting a numbered stream."""
        args = self.parse_one("cmd 2> err")

        self.assertEqual(
            args.get_redirect_target(StandardStream.ERROR),
            RedirectTarget(RedirectType.WRITE, "err")
        )
        self.assertIsNone(args.get_redirect_target())

    def test_redirect_is_not_an_argument(self):
        """Test that redirect targets are removed from the arguments."""
        args = self.parse_one("cmd x > out y")

        self.assertEqual(args.args, ["x", "y"])
        self.assertEqual(args.get_redirect_target().target, "out")

    def test_last_redirect_wins(self):
        """Test that a later redirect of the same stream replaces the earlier one."""
        self.assertEqual(self.parse_one("cmd > a >> b").get_redirect_target(), RedirectTarget(RedirectType.APPEND, "b"))

    def test_target_is_expanded(self):
        """Test that the target is expanded like any word."""
        self.assertEqual(self.parse_one("cmd > \"$a c\"").get_redirect_target().target, "b c")
        self.assertEqual(self.parse_one("cmd > f1*").get_redirect_target().target, "f1")

    def test_missing_target(self):
        """Test that a redirect needs a following word."""
        for line in ["cmd >", "cmd > > out", "cmd > ; x"]:
            with self.assertRaises(RedirectError):
                self.parser.parse(line)

    def test_ambiguous_target(self):
        """Test that a target must expand to exactly one string."""
        for line in ["cmd > f*", "cmd > $undefined"]:
            with self.assertRaises(RedirectError):
                self.parser.parse(line)

    def test_redirect_without_command(self):
        """Test a command that consists of a redirect only."""
        self.assertEqual(
            self.parse_one("> out"),
            InputArgs(None, redirect_targets={1: RedirectTarget(RedirectType.WRITE, "out")})
        )

    def test_empty_command_name(self):
        """Test that a quoted empty word is kept as the command name."""
        args = self.parse_one("'' foo")

        self.assertEqual(args.command, "")
        self.assertEqual(args.args, ["foo"])
        self.assertFalse(args.is_empty)
        self.assertTrue(self.parse_one("> out").is_empty)


class TestInputArgs(unittest.TestCase):
    """Test the parsed command structure."""

    def setUp(self):
        self.args = InputArgs(
            "cmd",
            {"a": None, "long": "v"},
            ["x", "y"],
            {2: RedirectTarget(RedirectType.APPEND, "err.log")}
        )

    def test_collections_are_copies(self):
        """Test that callers cannot mutate the parsed command."""
        self.args.options["b"] = None
        self.args.args.append("z")
        self.args.redirect_targets[1] = RedirectTarget(RedirectType.WRITE, "x")

        self.assertEqual(self.args.options, {"a": None, "long": "v"})
        self.assertEqual(self.args.args, ["x", "y"])
        self.assertEqual(list(self.args.redirect_targets), [2])

    def test_argc(self):
        """Test the argument count."""
        self.assertEqual(self.args.argc, 2)
        self.assertEqual(InputArgs("cmd").argc, 0)

    def test_has_any_option(self):
        """Test checking for any of several options."""
        self.assertTrue(self.args.has_any_option("z", "long"))
        self.assertFalse(self.args.has_any_option("z", "v"))
        self.assertFalse(self.args.has_any_option())

    def test_get_redirect_target(self):
        """Test looking up redirect targets by stream."""
        self.assertIsNone(self.args.get_redirect_target())
        self.assertEqual(self.args.get_redirect_target(2).target, "err.log")
        self.assertEqual(self.args.get_redirect_target(StandardStream.ERROR).target, "err.log")

    def test_equality(self):
        """Test value equality."""
        self.assertEqual(InputArgs("cmd", args=["x"]), InputArgs("cmd", {}, ["x"], {}))
        self.assertNotEqual(InputArgs("cmd"), InputArgs("other"))
        self.assertNotEqual(InputArgs("cmd"), "cmd")

    def test_repr(self):
        """Test that the representation names the command."""
        self.assertIn("command='cmd'", repr(self.args))


if __name__ == '__main__':
    unittest.main()
