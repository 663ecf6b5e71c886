from __future__ import annotations

import pytest

from uspin.core.exceptions import (
    ConfigLoadError,
    EmptyOperationListError,
    InvalidInputError,
    MixedOperationKindsError,
    PackageListParseError,
    PathResolutionError,
    UnsupportedOperationError,
    UspinError,
)


@pytest.mark.parametrize(
    "cls, builtin",
    [
        (InvalidInputError, ValueError),
        (PathResolutionError, OSError),
        (EmptyOperationListError, RuntimeError),
        (UnsupportedOperationError, TypeError),
        (MixedOperationKindsError, TypeError),
    ],
)
def test_errors_are_also_builtin_exceptions(cls, builtin):
    err = cls("boom", context={"k": "v"})
    assert isinstance(err, UspinError)
    assert isinstance(err, builtin)
    assert str(err) == "boom"
    assert err.context == {"k": "v"}


def test_to_json_error_payload():
    err = PackageListParseError("bad list", context={"path": "/x.packages"})
    assert err.to_json_error() == {
        "message": "bad list",
        "code": "PackageListParseError",
        "context": {"path": "/x.packages"},
    }


def test_context_is_copied():
    ctx = {"path": "a.spin"}
    err = ConfigLoadError("nope", context=ctx)
    ctx["path"] = "b.spin"
    assert err.context == {"path": "a.spin"}


def test_default_messages():
    assert "0 operations" in str(EmptyOperationListError())
    assert "Unknown or unsupported operation" in str(UnsupportedOperationError())
