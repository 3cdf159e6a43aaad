"""Tests for the object store error taxonomy."""

from pathlib import Path

import pytest


class TestHierarchy:
    @pytest.mark.parametrize(
        "name",
        [
            "MalformedFrameError",
            "InvalidAddressError",
            "ObjectNotFoundError",
            "CorruptObjectError",
            "ObjectIOError",
        ],
    )
    def test_all_derive_from_base(self, name: str) -> None:
        import odb.contracts as contracts

        assert issubclass(getattr(contracts, name), contracts.ObjectStoreError)

    def test_value_errors(self) -> None:
        from odb.contracts import InvalidAddressError, MalformedFrameError

        assert issubclass(MalformedFrameError, ValueError)
        assert issubclass(InvalidAddressError, ValueError)

    def test_not_found_is_lookup_error(self) -> None:
        from odb.contracts import ObjectNotFoundError

        assert issubclass(ObjectNotFoundError, LookupError)


class TestAttributes:
    def test_not_found_carries_path(self) -> None:
        from odb.contracts import ObjectNotFoundError

        err = ObjectNotFoundError(Path("objects/ab/cd"))
        assert err.path == Path("objects/ab/cd")
        assert "objects/ab/cd" in str(err)

    def test_corrupt_carries_path_and_reason(self) -> None:
        from odb.contracts import CorruptObjectError

        err = CorruptObjectError(Path("x"), "incorrect header check")
        assert err.path == Path("x")
        assert err.reason == "incorrect header check"
        assert "incorrect header check" in str(err)

    def test_io_error_carries_path(self) -> None:
        from odb.contracts import ObjectIOError

        err = ObjectIOError(Path("root"), "Permission denied")
        assert err.path == Path("root")
        assert "Permission denied" in str(err)

    def test_invalid_address_carries_address(self) -> None:
        from odb.contracts import InvalidAddressError

        err = InvalidAddressError("xyz")
        assert err.address == "xyz"
        assert "'xyz'" in str(err)
