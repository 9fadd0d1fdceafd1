"""Test cases for parameter registration and value access."""

import pytest

from paramconf import DuplicateParameterError, NoValueError, ParameterStore, UnknownParameterError


def test_default_value_is_returned_without_load():
    """Given a parameter registered with a default
    When getting it before any file is loaded
    Then the default is returned
    """
    store = ParameterStore()
    store.register("epochs", "100")

    assert store.get("epochs") == "100"
    assert store["epochs"] == "100"
    assert store.is_set("epochs")


def test_parameter_without_default_has_no_value():
    """Given a parameter registered without default
    When getting it
    Then NoValueError is raised
    """
    store = ParameterStore()
    store.register("output_dir")

    with pytest.raises(NoValueError) as exc_info:
        store.get("output_dir")

    assert exc_info.value.name == "output_dir"
    assert str(exc_info.value) == 'No value for parameter "output_dir" read and no default value defined.'
    assert not store.is_set("output_dir")


@pytest.mark.parametrize("second_default", ["", "1", "other"])
def test_duplicate_registration_fails(second_default: str):
    """Registering the same name twice fails regardless of the default."""
    store = ParameterStore()
    store.register("seed", "1")

    with pytest.raises(DuplicateParameterError) as exc_info:
        store.register("seed", second_default)

    assert exc_info.value.name == "seed"
    assert str(exc_info.value) == 'Parameter "seed" already exists!'
    assert store.get("seed") == "1"


def test_unknown_parameter_access_fails(store: ParameterStore):
    with pytest.raises(UnknownParameterError, match='Unknown parameter name: "batch_size"'):
        store.get("batch_size")
    with pytest.raises(UnknownParameterError):
        store["batch_size"]
    with pytest.raises(UnknownParameterError):
        store.is_set("batch_size")


def test_names_are_case_sensitive():
    store = ParameterStore()
    store.register("Name", "upper")
    store.register("name", "lower")

    assert store.get("Name") == "upper"
    assert store.get("name") == "lower"


def test_dict_style_inspection(store: ParameterStore):
    """Given a store with registered parameters
    When inspecting it like a mapping
    Then membership, size and ordering reflect the schema
    """
    store.register("alpha", "a")

    assert "model_path" in store
    assert "missing" not in store
    assert len(store) == 3
    assert list(store) == ["alpha", "learning_rate", "model_path"]
    assert store.to_dict() == {"alpha": "a", "learning_rate": "0.01", "model_path": None}
    assert repr(store) == "ParameterStore({'alpha': 'a', 'learning_rate': '0.01', 'model_path': None})"


def test_unset_state_does_not_collide_with_real_values():
    """A value equal to the historical sentinel text is an ordinary value."""
    store = ParameterStore()
    store.register("marker", "_#N/A#_")

    assert store.get("marker") == "_#N/A#_"
