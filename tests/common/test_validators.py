import pytest

from src.dispatch_auth.dispatch_auth.common.validators import require_at_most, require_non_empty, require_positive
from src.dispatch_auth.dispatch_auth.core.exceptions import BadRequestError


def test_require_non_empty_keeps_value():
    assert require_non_empty(" alice ", "username") == " alice "


@pytest.mark.parametrize("value", ["", "   ", None])
def test_require_non_empty_rejects_blank(value):
    with pytest.raises(BadRequestError):
        require_non_empty(value, "username")


@pytest.mark.parametrize("value", [0, -3, True, 2.5, "10"])
def test_require_positive_rejects(value):
    with pytest.raises(BadRequestError):
        require_positive(value, "width")


def test_require_positive_accepts_int():
    assert require_positive(64, "width") == 64


def test_require_at_most():
    assert require_at_most(4096, "width", 4096) == 4096
    with pytest.raises(BadRequestError):
        require_at_most(4097, "width", 4096)
