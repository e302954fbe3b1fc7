"""Unit tests for constructor introspection helpers."""

import inspect
from typing import Any, List

from wirekit.application.introspection import (
    annotation_name,
    injectable_parameters,
    is_forward_reference,
    is_injectable_type,
)


class Database:
    pass


class TestInjectableParameters:
    """Test cases for injectable_parameters."""

    def test_lists_annotated_and_bare_parameters(self):
        """Test that required parameters are listed with their annotations."""

        class Service:
            def __init__(self, database: Database, name, *args, retries: int = 3, **kwargs):
                pass

        assert injectable_parameters(Service) == [
            ("database", Database),
            ("name", inspect.Parameter.empty),
        ]

    def test_unresolvable_forward_reference_stays_a_string(self):
        """Test the fallback to raw annotations."""

        class Service:
            def __init__(self, client: "MissingClient"):  # noqa: F821
                pass

        assert injectable_parameters(Service) == [("client", "MissingClient")]


class TestAnnotationClassification:
    """Test cases for is_injectable_type, is_forward_reference and annotation_name."""

    def test_user_classes_are_injectable(self):
        """Test that project classes count."""
        assert is_injectable_type(Database)

    def test_placeholders_are_not_injectable(self):
        """Test builtins, typing constructs and non-classes."""
        assert not is_injectable_type(int)
        assert not is_injectable_type(object)
        assert not is_injectable_type(Any)
        assert not is_injectable_type(List[int])
        assert not is_injectable_type("Database")

    def test_forward_references(self):
        """Test which strings name a class."""
        assert is_forward_reference("Database")
        assert is_forward_reference("app.db.Database")
        assert not is_forward_reference("str")
        assert not is_forward_reference("List[int]")
        assert not is_forward_reference(Database)

    def test_annotation_name(self):
        """Test the bare name of classes and strings."""
        assert annotation_name(Database) == "Database"
        assert annotation_name("app.db.Database") == "Database"
