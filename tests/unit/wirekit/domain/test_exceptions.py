"""Unit tests for domain exceptions."""

from pathlib import Path

import pytest

from wirekit.domain.exceptions import (
    ContainerNotInstalledError,
    CyclicDependencyError,
    DIException,
    DuplicateClassNameError,
    DuplicateRegistrationError,
    RuntimeCircularResolutionError,
    UnloadableSourceError,
    UnregisteredDependencyError,
    UnresolvableError,
)


class TestDIException:
    """Test cases for the base DIException class."""

    def test_di_exception_is_exception(self):
        """Test that DIException inherits from Exception."""
        assert issubclass(DIException, Exception)

    @pytest.mark.parametrize(
        "exception_type",
        [
            CyclicDependencyError,
            DuplicateClassNameError,
            UnloadableSourceError,
            UnregisteredDependencyError,
            RuntimeCircularResolutionError,
            UnresolvableError,
            DuplicateRegistrationError,
            ContainerNotInstalledError,
        ],
    )
    def test_all_errors_inherit_from_di_exception(self, exception_type):
        """Test that every DI error can be caught as DIException."""
        assert issubclass(exception_type, DIException)


class TestCyclicDependencyError:
    """Test cases for CyclicDependencyError."""

    def test_names_offending_node_and_cycle(self):
        """Test that the error exposes the node closing the cycle and the path."""
        error = CyclicDependencyError(["X", "Y", "X"])

        assert error.node == "X"
        assert error.cycle == ["X", "Y", "X"]
        assert str(error) == "Cyclic dependency detected at X: X -> Y -> X"

    def test_self_cycle(self):
        """Test a class depending on itself."""
        error = CyclicDependencyError(["Solo", "Solo"])
        assert error.node == "Solo"
        assert "Solo -> Solo" in str(error)


class TestRuntimeCircularResolutionError:
    """Test cases for RuntimeCircularResolutionError."""

    def test_chain_message(self):
        """Test that the message lists the class names along the chain."""
        error = RuntimeCircularResolutionError(["ServiceA", "ServiceB", "ServiceA"])

        assert error.cycle == ["ServiceA", "ServiceB", "ServiceA"]
        assert error.node == "ServiceA"
        assert str(error) == "Circular resolution detected at ServiceA: ServiceA -> ServiceB -> ServiceA"


class TestUnregisteredDependencyError:
    """Test cases for UnregisteredDependencyError."""

    def test_names_identity(self):
        """Test that the missing identity is kept and named."""

        class MissingService:
            pass

        error = UnregisteredDependencyError(MissingService)

        assert error.identity is MissingService
        assert str(error) == "No registration for dependency: MissingService"


class TestUnresolvableError:
    """Test cases for UnresolvableError."""

    def test_with_reason(self):
        """Test message with a reason."""

        class Broken:
            pass

        error = UnresolvableError(Broken, "constructor failed")

        assert error.cls is Broken
        assert error.reason == "constructor failed"
        assert str(error) == "Cannot resolve dependency for type: Broken. Reason: constructor failed"

    def test_without_reason(self):
        """Test message without a reason."""

        class Broken:
            pass

        assert str(UnresolvableError(Broken)) == "Cannot resolve dependency for type: Broken"


class TestGenerationErrors:
    """Test cases for errors raised during generation."""

    def test_duplicate_class_name(self):
        """Test that both modules are listed."""
        error = DuplicateClassNameError("UserService", ["app.a", "app.b"])

        assert error.name == "UserService"
        assert "app.a, app.b" in str(error)

    def test_unloadable_source(self):
        """Test that the path and reason are kept."""
        error = UnloadableSourceError(Path("app/broken.py"), "SyntaxError: invalid syntax")

        assert error.path == Path("app/broken.py")
        assert error.reason == "SyntaxError: invalid syntax"
        assert "app/broken.py" in str(error)

    def test_duplicate_registration(self):
        """Test that the type is named."""

        class Service:
            pass

        assert str(DuplicateRegistrationError(Service)) == "Dependency Service is already registered."
