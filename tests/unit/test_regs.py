import pytest
from archns.diagnostics import UnknownName
from archns.regs import normalize_reg, reg_num, is_reg

def test_abi_and_xnames():
    assert normalize_reg("x10") == "a0"
    assert normalize_reg("X5") == "t0"
    assert normalize_reg("fp") == "s0"
    assert reg_num("t6") == 31
    assert reg_num("a0") == 10
    assert is_reg("s11")

def test_float_registers():
    assert normalize_reg("f10") == "fa0"
    assert normalize_reg("f28") == "ft8"
    assert reg_num("fs11") == 27

def test_invalid():
    with pytest.raises(UnknownName):
        normalize_reg("x32")
    with pytest.raises(ValueError):
        normalize_reg("foo")
    assert not is_reg("x32")
