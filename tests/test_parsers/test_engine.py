import pytest

from flagline.exceptions import (
    MissingArgumentError,
    MissingRequiredOptionsError,
    UnrecognizedOptionError,
)
from flagline.parser import Arity, CommandLineParser, Options, parse


def build_options() -> Options:
    options = Options()
    options.add_option("-f", "--file", arity=Arity.ONE, help="Input file")
    options.add_option("-v", help="Verbose output")
    options.add_option("-o", arity=Arity.ONE, required=True, help="Output file")
    return options


def test_file_verbose_output():
    """Test the basic scenario with a value option, a flag and a required option."""
    cmd = parse(build_options(), ["-f", "in.txt", "-v", "-o", "out.txt"])
    assert cmd.get_option_value("file") == "in.txt"
    assert cmd.get_option_value("-f") == "in.txt"
    assert cmd.has_option("v")
    assert cmd.get_option_values("v") is None
    assert cmd.get_option_values("o") == ["out.txt"]
    assert cmd.get_args() == []


def test_missing_argument_at_end():
    with pytest.raises(MissingArgumentError) as excinfo:
        parse(build_options(), ["-f"])
    assert excinfo.value.option_key == "f"


def test_stop_at_non_option_leaves_required_unsatisfied():
    """Draining after a positional leaves a required option unsatisfied."""
    with pytest.raises(MissingRequiredOptionsError) as excinfo:
        parse(build_options(), ["-v", "extra", "-f", "x"], stop_at_non_option=True)
    assert excinfo.value.missing == ["o"]


def test_stop_at_non_option_without_required():
    options = Options()
    options.add_option("-f", "--file", arity="one")
    options.add_option("-v")
    cmd = parse(options, ["-v", "extra", "-f", "x"], stop_at_non_option=True)
    assert cmd.get_args() == ["extra", "-f", "x"]
    assert cmd.has_option("v")
    assert not cmd.has_option("f")


def test_value_option_followed_by_known_option():
    """A known option token is never swallowed as a value."""
    with pytest.raises(MissingArgumentError) as excinfo:
        parse(build_options(), ["-f", "-v", "-o", "out.txt"])
    assert excinfo.value.option_key == "f"


def test_unknown_dashed_token_is_a_value():
    """Unknown dashed tokens are valid values for an option."""
    cmd = parse(build_options(), ["-f", "-weird", "-o", "out.txt"])
    assert cmd.get_option_value("f") == "-weird"


def test_positionals_only():
    options = Options()
    options.add_option("-v")
    tokens = ["a", "b", "c d", "e"]
    cmd = parse(options, tokens)
    assert cmd.get_args() == tokens
    assert cmd.options == []


def test_none_arguments_treated_as_empty():
    options = Options()
    options.add_option("-v")
    cmd = parse(options, None)
    assert cmd.get_args() == []
    assert list(cmd) == []


def test_terminator_consumed_once():
    options = Options()
    options.add_option("-v")
    cmd = parse(options, ["a", "--", "-v", "--", "b", "--"])
    assert cmd.get_args() == ["a", "-v", "b"]
    assert not cmd.has_option("v")


def test_lone_dash_is_positional():
    options = Options()
    options.add_option("-v")
    cmd = parse(options, ["-", "-v", "x"])
    assert cmd.get_args() == ["-", "x"]
    assert cmd.has_option("v")


def test_lone_dash_starts_draining_when_stopping():
    options = Options()
    options.add_option("-v")
    cmd = parse(options, ["-", "-v", "x"], stop_at_non_option=True)
    assert cmd.get_args() == ["-v", "x"]
    assert not cmd.has_option("v")


def test_unrecognized_option():
    with pytest.raises(UnrecognizedOptionError) as excinfo:
        parse(build_options(), ["-o", "out", "-x"])
    assert excinfo.value.token == "-x"
    assert str(excinfo.value) == "Unrecognized option: -x"


def test_unrecognized_option_kept_when_stopping():
    options = Options()
    options.add_option("-v")
    cmd = parse(options, ["-v", "-x", "-v", "y"], stop_at_non_option=True)
    assert cmd.get_args() == ["-x", "-v", "y"]


def test_first_error_ends_the_pass():
    """The first unrecognized token is reported; later tokens are never examined."""
    options = Options()
    options.add_option("-v")
    parser = CommandLineParser()
    with pytest.raises(UnrecognizedOptionError) as excinfo:
        parser.parse(options, ["a", "-x", "b", "-y"])
    assert excinfo.value.token == "-x"


def test_extra_hyphens_do_not_name_an_option():
    options = Options()
    options.add_option("-v")
    with pytest.raises(UnrecognizedOptionError) as excinfo:
        parse(options, ["---v"])
    assert excinfo.value.token == "---v"


def test_extra_hyphens_taken_as_value():
    cmd = parse(build_options(), ["-f", "---v", "-o", "out.txt"])
    assert cmd.get_option_value("f") == "---v"
    assert not cmd.has_option("v")


def test_quotes_stripped_from_values():
    options = Options()
    options.add_option("-m", arity="one")
    options.add_option("-n", arity="one")
    cmd = parse(options, ["-m", '"hello world"', "-n", "'x"])
    assert cmd.get_option_value("m") == "hello world"
    assert cmd.get_option_value("n") == "'x"


def test_quotes_kept_on_positionals():
    options = Options()
    cmd = parse(options, ['"quoted"'])
    assert cmd.get_args() == ['"quoted"']


def test_single_value_option_full_releases_token():
    """Once an option holds its single value, the next token is handled normally."""
    cmd = parse(build_options(), ["-o", "out.txt", "extra"])
    assert cmd.get_option_values("o") == ["out.txt"]
    assert cmd.get_args() == ["extra"]


def test_repeated_single_value_option():
    cmd = parse(build_options(), ["-o", "a", "-o", "b"])
    assert cmd.get_option_values("o") == ["a"]
    assert cmd.get_args() == ["b"]


def test_unbounded_option_consumes_until_next_option():
    options = Options()
    options.add_option("-i", "--include", arity=Arity.UNBOUNDED)
    options.add_option("-v")
    cmd = parse(options, ["-i", "a", "b", "c", "-v", "--include", "d"])
    assert cmd.get_option_values("include") == ["a", "b", "c", "d"]
    assert cmd.has_option("v")
    assert cmd.get_args() == []


def test_unbounded_option_requires_a_value():
    options = Options()
    options.add_option("-i", arity=Arity.UNBOUNDED)
    with pytest.raises(MissingArgumentError):
        parse(options, ["-i"])


def test_optional_value_option():
    options = Options()
    options.add_option("-d", "--debug", arity=Arity.OPTIONAL)
    options.add_option("-v")

    cmd = parse(options, ["-d", "-v"])
    assert cmd.has_option("debug")
    assert cmd.get_option_values("debug") == []
    assert cmd.get_option_value("debug", "on") == "on"

    cmd = parse(options, ["--debug", "trace"])
    assert cmd.get_option_values("d") == ["trace"]

    cmd = parse(options, ["-d"])
    assert cmd.get_option_values("d") == []


def test_long_option_lookup_variants():
    options = build_options()
    cmd = parse(options, ["--file", "a", "-o", "b"])
    assert cmd.get_option_value("f") == "a"
    assert "file" in cmd
    assert "--file" in cmd
    assert "v" not in cmd


def test_registry_reused_across_parses():
    """Values from one parse never leak into the next."""
    options = build_options()
    first = parse(options, ["-f", "one", "-o", "x"])
    second = parse(options, ["-o", "y"])
    assert first.get_option_value("f") == "one"
    assert not second.has_option("f")
    assert second.get_option_values("o") == ["y"]
    assert first.get_option_values("o") == ["x"]


def test_missing_required_option():
    with pytest.raises(MissingRequiredOptionsError) as excinfo:
        parse(build_options(), ["-v"])
    assert excinfo.value.missing == ["o"]
    assert str(excinfo.value) == "Missing required option: o"


def test_required_option_anywhere_satisfies():
    cmd = parse(build_options(), ["x", "-v", "y", "-o", "z", "w"])
    assert cmd.get_args() == ["x", "y", "w"]
    assert cmd.get_option_value("o") == "z"


def test_multiple_missing_required_options_in_declaration_order():
    options = Options()
    options.add_option("-b", arity="one", required=True)
    options.add_option("-a", required=False)
    options.add_option("--zeta", arity="one", required=True)
    with pytest.raises(MissingRequiredOptionsError) as excinfo:
        parse(options, ["-a"])
    assert excinfo.value.missing == ["b", "zeta"]
    assert str(excinfo.value) == "Missing required options: b, zeta"


def test_flattener_is_used():
    calls = []

    def flattener(options, arguments, stop_at_non_option):
        calls.append((list(arguments), stop_at_non_option))
        return [token for argument in arguments for token in argument.split("=", 1)]

    parser = CommandLineParser(flattener=flattener)
    cmd = parser.parse(build_options(), ["-o=out.txt"], stop_at_non_option=True)
    assert calls == [(["-o=out.txt"], True)]
    assert cmd.get_option_value("o") == "out.txt"


def test_to_dict():
    cmd = parse(build_options(), ["-f", "in.txt", "-v", "-o", "out.txt", "rest"])
    assert cmd.to_dict() == {
        "options": {"f": ["in.txt"], "v": True, "o": ["out.txt"]},
        "args": ["rest"],
    }


def test_terminator_taken_as_value_while_consuming():
    """Only a known option ends value consumption; `--` is a value here."""
    cmd = parse(build_options(), ["-f", "--", "-o", "out", "--", "x"])
    assert cmd.get_option_value("f") == "--"
    assert cmd.get_args() == ["x"]
