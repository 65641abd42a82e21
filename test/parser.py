"""
Parser facade behavioral tests (registration chaining, prompt handling, shell mode).

Conventions
- Test method names follow CamelCase per project convention.
- Shell-mode output is captured by patching argscan.faults.console.
"""

from __future__ import annotations

import io
import sys
import unittest
from unittest import TestCase, mock

from rich.console import Console

import argscan.faults
from argscan import (
    Mode,
    Parser,
    OptionSpec,
    OptionKind,
    PositionalSpec,
    Positional,
    Flag,
    RequiredValue,
    OptionalValue,
    Selector,
    DuplicateOptionError,
    InvalidRestPositionError,
    UnknownOptionError,
    MissingArgsError,
)


class ParserTestCase(TestCase):
    def build(self, mode=Mode.MIXED, **options):
        return (
            Parser(mode, **options)
            .add_option(OptionSpec.flag("verbose", alias="v", repeatable=True))
            .add_option(OptionSpec.required("output", alias="o"))
            .add_option(OptionSpec.optional("color"))
            .add_positional(PositionalSpec.named())
            .add_positional(PositionalSpec.rest())
        )


class TestRegistration(ParserTestCase):
    def testChaining(self):
        parser = Parser()
        self.assertIs(parser.add_option(OptionSpec.flag("verbose")), parser)
        self.assertIs(parser.add_positional(PositionalSpec.named()), parser)

    def testRegistriesAreExposed(self):
        parser = self.build()
        self.assertIs(parser.options.lookup("output").kind, OptionKind.REQUIRED_VALUE)
        self.assertEqual(parser.positionals.named, 1)
        self.assertTrue(parser.positionals.rest)

    def testRegistrationFaultsRaiseEvenInShellMode(self):
        parser = self.build(shell=True)
        with self.assertRaises(DuplicateOptionError):
            parser.add_option(OptionSpec.flag("verbose"))
        with self.assertRaises(InvalidRestPositionError):
            parser.add_positional(PositionalSpec.named())

    def testDefaults(self):
        parser = Parser()
        self.assertIs(parser.mode, Mode.MIXED)
        self.assertFalse(parser.shell)
        self.assertFalse(parser.fancy)
        self.assertTrue(parser.colorful)

    def testPropertiesAreReadOnly(self):
        parser = Parser()
        with self.assertRaises(AttributeError):
            parser.shell = True
        with self.assertRaises(AttributeError):
            parser.mode = Mode.OPTIONS_FIRST

    def testWrongModeRejected(self):
        with self.assertRaises(TypeError):
            Parser("mixed")


class TestParse(ParserTestCase):
    def testIterablePrompt(self):
        self.assertEqual(
            self.build().parse(["-vv", "--output", "out.txt", "src"]),
            [Flag("verbose", True), Flag("verbose", True), RequiredValue("output", "out.txt"), Positional("src")],
        )

    def testStringPromptIsShellSplit(self):
        self.assertEqual(
            self.build().parse("--color=auto 'my file.txt' -o \"a b\""),
            [OptionalValue("color", "auto"), Positional("my file.txt"), RequiredValue("output", "a b")],
        )

    def testTokensAreUsedVerbatim(self):
        self.assertEqual(self.build().parse(["src", " --verbose"]), [Positional("src"), Positional(" --verbose")])

    def testDefaultPromptReadsArgv(self):
        with mock.patch.object(sys, "argv", ["prog", "-v", "src"]):
            self.assertEqual(self.build().parse(), [Flag("verbose", True), Positional("src")])

    def testOptionsFirstMode(self):
        args = Selector(self.build(Mode.OPTIONS_FIRST).parse("-v build --verbose -o x"))
        self.assertEqual(args.count("verbose"), 1)
        self.assertEqual(args.positionals(), ["build", "--verbose", "-o", "x"])
        self.assertIsNone(args.value("output"))

    def testFaultsRaiseOutsideShellMode(self):
        with self.assertRaises(UnknownOptionError) as context:
            self.build().parse(["--nope", "src"])
        self.assertEqual(context.exception.name, "nope")

    def testMissingArgs(self):
        with self.assertRaises(MissingArgsError) as context:
            self.build().parse("-v")
        self.assertEqual((context.exception.actual, context.exception.expected), (0, 1))

    def testWrongPromptTypesRejected(self):
        parser = self.build()
        for prompt in (None, 12, ["-v", 1]):
            with self.subTest(prompt=prompt):
                with self.assertRaises(TypeError):
                    parser.parse(prompt)


class TestShellMode(ParserTestCase):
    def setUp(self):
        self.console = Console(file=io.StringIO(), width=120, color_system=None)
        patcher = mock.patch.object(argscan.faults, "console", self.console)
        patcher.start()
        self.addCleanup(patcher.stop)

    def testFaultExits(self):
        with self.assertRaises(SystemExit) as context:
            self.build(shell=True).parse(["--nope", "src"])
        self.assertEqual(context.exception.code, 1)
        output = self.console.file.getvalue()
        self.assertIn("--nope is undefined", output)
        self.assertIn("Unknown Option", output)

    def testFancyFaultExits(self):
        with self.assertRaises(SystemExit):
            self.build(shell=True, fancy=True, colorful=False).parse([])
        self.assertIn("1 arg(s) required, but got 0", self.console.file.getvalue())

    def testSuccessIsUntouched(self):
        self.assertEqual(self.build(shell=True).parse(["src"]), [Positional("src")])
        self.assertEqual(self.console.file.getvalue(), "")


class TestRepr(TestCase):
    def testRepr(self):
        self.assertTrue(repr(Parser(Mode.OPTIONS_FIRST)).startswith("parser(mode=Mode.OPTIONS_FIRST"))


if __name__ == "__main__":
    unittest.main()
