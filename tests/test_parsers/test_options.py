import pytest

from flagline.exceptions import OptionDefinitionError
from flagline.parser import Arity, Option, Options


def test_str():
    """Test the string representation of Options."""
    options = Options()
    assert str(options) == "Options(options=0, names=0, groups=0, required=0)"

    options.add_option("-f", "--file", arity="one")
    options.add_option("--output", arity="one", required=True)
    options.add_option("-a")
    options.add_option("-b")
    options.add_group("-a", "-b", required=True)
    assert str(options) == "Options(options=4, names=5, groups=1, required=2)"
    assert repr(options) == str(options)


def test_lookup_by_any_name():
    options = Options()
    option = options.add_option("-f", "--file", arity=Arity.ONE, help="Input")
    assert option.key == "f"
    assert option.flags == ("-f", "--file")
    for name in ("f", "-f", "--f", "file", "--file", "-file"):
        assert options.get_option(name) is option
        assert name in options
    assert options.get_option("x") is None
    assert len(options) == 1
    assert list(options) == [option]


def test_long_only_option_key():
    options = Options()
    option = options.add_option("--verbose")
    assert option.key == "verbose"
    assert option.opt is None


def test_required_options_in_declaration_order():
    options = Options()
    options.add_option("-z", arity="one", required=True)
    options.add_option("-a")
    options.add_option("-b")
    group = options.add_group("-a", "-b", required=True)
    options.add_option("-y", arity="one", required=True)
    assert options.get_required_options() == ["z", group, "y"]
    required = options.get_required_options()
    required.clear()
    assert len(options.get_required_options()) == 3


@pytest.mark.parametrize(
    "flags",
    [
        (),
        ("f",),
        ("-",),
        ("--",),
        ("-f", "-g"),
        ("--file", "--path"),
        ("-f=x",),
        ("--fi le",),
    ],
)
def test_invalid_flags(flags):
    options = Options()
    with pytest.raises(OptionDefinitionError):
        options.add_option(*flags)


def test_duplicate_names_rejected():
    options = Options()
    options.add_option("-f", "--file")
    with pytest.raises(OptionDefinitionError):
        options.add_option("--file")
    with pytest.raises(OptionDefinitionError):
        options.add_option("--f")


def test_invalid_arity_rejected():
    options = Options()
    with pytest.raises(OptionDefinitionError):
        options.add_option("-f", arity="two")


def test_register_prebuilt_option():
    options = Options()
    option = Option(opt="x", long_opt="extract", arity=Arity.UNBOUNDED)
    assert options.register(option) is option
    assert options.get_option("--extract") is option
    with pytest.raises(OptionDefinitionError):
        options.register(Option())


def test_arity_aliases():
    assert Arity("?") is Arity.OPTIONAL
    assert Arity("flag") is Arity.NONE
    assert Arity(1) is Arity.ONE
    assert Arity(" Many ") is Arity.UNBOUNDED
    assert Arity.ONE.capacity == 1
    assert Arity.UNBOUNDED.capacity is None
    assert not Arity.NONE.takes_value
    assert Arity.OPTIONAL.value_optional
    with pytest.raises(ValueError):
        Arity("lots")
