import pytest
from hypothesis import given, strategies as st

from flexon.config import CTConfig, RTConfig


def _flags(cfg):
    return (cfg.comma(), cfg.trailing_comma(), cfg.comments())


def test_rtconfig_defaults():
    assert _flags(RTConfig()) == (False, False, False)


def test_rtconfig_optional_commas_allow_trailing():
    cfg = RTConfig().require_comma(False)
    assert cfg.comma() is True
    assert cfg.trailing_comma() is True


def test_rtconfig_required_commas():
    cfg = RTConfig().require_comma(False).require_comma(True)
    assert cfg.comma() is False
    assert cfg.trailing_comma() is False


def test_rtconfig_allow_trailing_comma():
    cfg = RTConfig().allow_trailing_comma(True)
    assert cfg.trailing_comma() is True
    assert cfg.comma() is False


def test_rtconfig_trailing_comma_sticks_when_commas_optional():
    cfg = RTConfig().require_comma(False).allow_trailing_comma(False)
    assert cfg.trailing_comma() is True


def test_rtconfig_allow_comments():
    assert RTConfig().allow_comments(True).comments() is True
    assert RTConfig().allow_comments(True).allow_comments(False).comments() is False


def test_rtconfig_builders_leave_original_unchanged():
    base = RTConfig()
    base.require_comma(False).allow_comments(True)
    assert _flags(base) == (False, False, False)


def test_ctconfig_defaults():
    assert _flags(CTConfig()) == (False, False, False)


def test_ctconfig_optional_comma():
    cfg = CTConfig().optional_comma()
    assert cfg.comma() is True
    assert cfg.trailing_comma() is True


def test_ctconfig_allow_trailing_comma():
    cfg = CTConfig().allow_trailing_comma()
    assert cfg.trailing_comma() is True
    assert cfg.comma() is False


def test_ctconfig_allow_comments():
    cfg = CTConfig().allow_comments()
    assert cfg.comments() is True
    assert cfg.comma() is False


def test_ctconfig_optional_comma_twice_rejected():
    with pytest.raises(TypeError):
        CTConfig().optional_comma().optional_comma()


def test_ctconfig_trailing_after_optional_comma_rejected():
    with pytest.raises(TypeError):
        CTConfig().optional_comma().allow_trailing_comma()


def test_ctconfig_comments_twice_rejected():
    with pytest.raises(TypeError):
        CTConfig().allow_comments().allow_comments()


@given(st.booleans(), st.booleans(), st.booleans())
def test_runtime_and_fixed_configs_agree(optional, trailing, comments):
    rt = RTConfig()
    ct = CTConfig()
    if optional:
        rt = rt.require_comma(False)
        ct = ct.optional_comma()
    if trailing and not optional:
        rt = rt.allow_trailing_comma(True)
        ct = ct.allow_trailing_comma()
    if comments:
        rt = rt.allow_comments(True)
        ct = ct.allow_comments()
    assert _flags(rt) == _flags(ct)