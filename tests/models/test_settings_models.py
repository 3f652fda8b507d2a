import pytest
from pydantic import ValidationError
from farbfeld.models import CodecParams


def test_codecparams_default():
    p = CodecParams()
    assert p.validate_magic is True
    assert p.max_pixels is None
    assert p.channel_overflow == "clamp"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_pixels": 0},
        {"max_pixels": -10},
        {"channel_overflow": "wrap"},
    ],
)
def test_codecparams_validation_raises(kwargs):
    with pytest.raises(ValidationError):
        CodecParams(**kwargs)
