from enum import Enum

import pytest

from clearopt.exceptions import OptionContractError, OptionDeclarationError
from clearopt.parser.binder import BindingKind
from clearopt.parser.option_arity import OptionArity
from clearopt.parser.option_registry import OptionRegistry


class Level(Enum):
    LOW = "low"
    HIGH = "high"


def test_add_option_derives_names_and_dest():
    registry = OptionRegistry()
    option = registry.add_option("-d", "--log-directory", help="Denotes log directory.")
    assert option.short_name == "d"
    assert option.long_name == "log-directory"
    assert option.dest == "log_directory"
    assert option.canonical_name == "d"
    assert option.get_names_text() == "-d, --log-directory"
    assert option.get_names_text(add_dashes=False) == "d, log-directory"


def test_canonical_name_falls_back_to_long_name():
    registry = OptionRegistry()
    option = registry.add_option("--files", type=list[str], arity="array")
    assert option.canonical_name == "files"
    assert option.is_array


def test_short_only_dest():
    registry = OptionRegistry()
    assert registry.add_option("-V", type=bool).dest == "v"


def test_explicit_dest():
    registry = OptionRegistry()
    option = registry.add_option("-i", "--interactive", dest="is_interactive", type=bool)
    assert option.dest == "is_interactive"


@pytest.mark.parametrize(
    "flags",
    [
        (),
        ("-ab",),
        ("-",),
        ("-=",),
        ("--",),
        ("--_hidden",),
        ("directory",),
        ("-a", "-b"),
        ("--alpha", "--beta"),
    ],
)
def test_invalid_flags(flags):
    registry = OptionRegistry()
    with pytest.raises(OptionDeclarationError):
        registry.add_option(*flags)


def test_duplicate_names_rejected():
    registry = OptionRegistry()
    registry.add_option("-d", "--directory")
    with pytest.raises(OptionDeclarationError):
        registry.add_option("-d", "--dir")
    with pytest.raises(OptionDeclarationError):
        registry.add_option("-x", "--directory", dest="other")


def test_duplicate_dest_rejected():
    registry = OptionRegistry()
    registry.add_option("-d", "--directory")
    with pytest.raises(OptionDeclarationError):
        registry.add_option("-x", dest="directory")


def test_invalid_dest_rejected():
    registry = OptionRegistry()
    with pytest.raises(OptionDeclarationError):
        registry.add_option("-d", dest="not valid")
    with pytest.raises(OptionDeclarationError):
        registry.add_option("-e", dest="1st")


def test_help_option_names_are_reserved():
    registry = OptionRegistry()
    registry.add_help_option("-h", "--help")
    with pytest.raises(OptionDeclarationError):
        registry.add_option("-h", "--host")
    with pytest.raises(OptionDeclarationError):
        registry.add_help_option("--usage")


def test_help_option_defaults():
    registry = OptionRegistry()
    help_option = registry.add_help_option()
    assert help_option.long_name == "help"
    assert help_option.short_name is None
    assert help_option.help == "Display this help screen."
    assert registry.help_option is help_option


@pytest.mark.parametrize(
    "field_type, arity",
    [
        (list[str], OptionArity.SCALAR),
        (str, OptionArity.ARRAY),
        (int, OptionArity.DELIMITED_LIST),
        (list[int], OptionArity.DELIMITED_LIST),
        (tuple[str, ...], OptionArity.DELIMITED_LIST),
    ],
)
def test_arity_contract_violations(field_type, arity):
    registry = OptionRegistry()
    with pytest.raises(OptionContractError):
        registry.add_option("--values", type=field_type, arity=arity)


@pytest.mark.parametrize(
    "field_type, arity, kind",
    [
        (bool, "scalar", BindingKind.BOOLEAN),
        (str, "single", BindingKind.SCALAR),
        (Level, "scalar", BindingKind.SCALAR),
        (int | None, "scalar", BindingKind.NULLABLE),
        (list[int], "many", BindingKind.ARRAY),
        (tuple[float, ...], "array", BindingKind.ARRAY),
        (list[str], "delimited-list", BindingKind.DELIMITED_LIST),
    ],
)
def test_binding_resolved_at_registration(field_type, arity, kind):
    registry = OptionRegistry()
    option = registry.add_option("--values", type=field_type, arity=arity)
    assert option.binding.kind == kind


def test_unknown_arity_rejected():
    registry = OptionRegistry()
    with pytest.raises(OptionDeclarationError):
        registry.add_option("--values", arity="bogus")


def test_separator_only_for_delimited_lists():
    registry = OptionRegistry()
    with pytest.raises(OptionDeclarationError):
        registry.add_option("--name", separator=",")
    with pytest.raises(OptionDeclarationError):
        registry.add_option(
            "--paths", type=list[str], arity="delimited_list", separator=",,"
        )
    option = registry.add_option(
        "--exclude", type=list[str], arity="delimited_list", separator=","
    )
    assert option.separator == ","


def test_defaults_are_coerced():
    registry = OptionRegistry()
    assert registry.add_option("-n", type=int, default="3").default == 3
    assert registry.add_option("--level", type=Level, default="high").default is Level.HIGH
    ports = registry.add_option(
        "--ports", type=tuple[int, ...], arity="array", default=["80", 443]
    )
    assert ports.default == (80, 443)


@pytest.mark.parametrize(
    "field_type, arity, default",
    [
        (int, "scalar", "three"),
        (bool, "scalar", "yes"),
        (list[int], "array", "1"),
        (Level, "scalar", "medium"),
    ],
)
def test_invalid_defaults_rejected(field_type, arity, default):
    registry = OptionRegistry()
    with pytest.raises(OptionDeclarationError):
        registry.add_option("--value", type=field_type, arity=arity, default=default)


def test_required_must_be_bool():
    registry = OptionRegistry()
    with pytest.raises(OptionDeclarationError):
        registry.add_option("-d", required="yes")


def test_value_list_declaration():
    registry = OptionRegistry()
    registry.add_option("-d", "--directory")
    value_list = registry.set_value_list("patterns", maximum_elements=2)
    assert value_list.dest == "patterns"
    assert registry.value_list is value_list
    with pytest.raises(OptionDeclarationError):
        registry.set_value_list("others")


@pytest.mark.parametrize("dest, maximum", [("directory", -1), ("items", -2)])
def test_invalid_value_list(dest, maximum):
    registry = OptionRegistry()
    registry.add_option("-d", "--directory")
    with pytest.raises(OptionDeclarationError):
        registry.set_value_list(dest, maximum_elements=maximum)


def test_registry_introspection():
    registry = OptionRegistry()
    registry.add_option("-d", "--directory", required=True)
    registry.add_option("-v", "--verbose", type=bool, default=True)
    assert len(registry) == 2
    assert [option.dest for option in registry] == ["directory", "verbose"]
    assert registry.get_option("verbose").default is True
    assert registry.get_option("missing") is None
    definitions = registry.to_definition_list()
    assert definitions[0]["long_name"] == "directory"
    assert definitions[0]["required"] is True
    assert "required=1" in str(registry)
