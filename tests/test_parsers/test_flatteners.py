import pytest

from flagline.exceptions import UnrecognizedOptionError
from flagline.parser import (
    Arity,
    CommandLineParser,
    Options,
    basic_flatten,
    gnu_flatten,
    posix_flatten,
)
from flagline.protocols import FlattenerProtocol


def build_options() -> Options:
    options = Options()
    options.add_option("-a", "--alpha")
    options.add_option("-b", "--beta")
    options.add_option("-c", "--charlie", arity=Arity.ONE)
    options.add_option("-D", arity=Arity.ONE)
    return options


def test_flatteners_satisfy_protocol():
    for flattener in (basic_flatten, gnu_flatten, posix_flatten):
        assert isinstance(flattener, FlattenerProtocol)


def test_basic_flatten_is_identity():
    tokens = ["-abc", "--charlie=x", "y"]
    assert basic_flatten(build_options(), tokens, False) == tokens


def test_gnu_flatten_splits_equals():
    options = build_options()
    assert gnu_flatten(options, ["--charlie=x", "-c=y"], False) == [
        "--charlie",
        "x",
        "-c",
        "y",
    ]


def test_gnu_flatten_glued_value():
    assert gnu_flatten(build_options(), ["-Dkey=value", "-a"], False) == [
        "-D",
        "key=value",
        "-a",
    ]


def test_gnu_flatten_stops_at_unknown_option():
    assert gnu_flatten(build_options(), ["-a", "-x", "--charlie=y"], True) == [
        "-a",
        "-x",
        "--charlie=y",
    ]


def test_gnu_flatten_terminator_passes_rest():
    assert gnu_flatten(build_options(), ["--", "--charlie=y"], False) == [
        "--",
        "--charlie=y",
    ]


def test_posix_flatten_bundling():
    """Test the bundling of short options in the POSIX style."""
    assert posix_flatten(build_options(), ["-ab"], False) == ["-a", "-b"]


def test_posix_flatten_bundle_last_has_value():
    assert posix_flatten(build_options(), ["-abc", "value"], False) == [
        "-a",
        "-b",
        "-c",
        "value",
    ]


def test_posix_flatten_bundle_glued_value():
    assert posix_flatten(build_options(), ["-acvalue", "-b"], False) == [
        "-a",
        "-c",
        "value",
        "-b",
    ]


def test_posix_flatten_long_equals():
    assert posix_flatten(build_options(), ["--charlie=x=y", "--alpha"], False) == [
        "--charlie",
        "x=y",
        "--alpha",
    ]


def test_posix_flatten_unknown_in_bundle():
    assert posix_flatten(build_options(), ["-axb"], False) == ["-a", "-xb"]


def test_posix_flatten_stop_at_non_option():
    options = build_options()
    assert posix_flatten(options, ["-c", "val", "file", "-ab"], True) == [
        "-c",
        "val",
        "file",
        "-ab",
    ]
    assert posix_flatten(options, ["-axb", "-ab"], True) == ["-a", "-xb", "-ab"]


def test_posix_flatten_terminator():
    assert posix_flatten(build_options(), ["-ab", "--", "-ab"], False) == [
        "-a",
        "-b",
        "--",
        "-ab",
    ]


def test_parser_with_posix_flattener():
    parser = CommandLineParser(flattener=posix_flatten)
    cmd = parser.parse(build_options(), ["-abc", "value", "rest"])
    assert cmd.has_option("alpha")
    assert cmd.has_option("beta")
    assert cmd.get_option_value("charlie") == "value"
    assert cmd.get_args() == ["rest"]


def test_parser_with_posix_flattener_invalid_bundle():
    parser = CommandLineParser(flattener=posix_flatten)
    with pytest.raises(UnrecognizedOptionError) as excinfo:
        parser.parse(build_options(), ["-axb"])
    assert excinfo.value.token == "-xb"


def test_parser_with_gnu_flattener():
    parser = CommandLineParser(flattener=gnu_flatten)
    cmd = parser.parse(build_options(), ["--charlie=x", "-Dfoo"])
    assert cmd.get_option_value("c") == "x"
    assert cmd.get_option_value("D") == "foo"
