from archns.diagnostics import error, defect

def test_error_str():
    d = error("base de opcodes 1 invade el rango genérico [0, 11)", owner="riscv",
              hint="use una base >= 11")
    s = str(d)
    assert s.startswith("riscv: ERROR: base de opcodes 1")
    assert "(pista: use una base >= 11)" in s

def test_error_without_owner():
    assert str(error("tabla incompleta")) == "ERROR: tabla incompleta"

def test_defect_carries_diagnostic(caplog):
    exc = defect("rango solapado", owner="riscv")
    assert exc.diagnostic.severity == "error"
    assert exc.diagnostic.owner == "riscv"
    assert str(exc) == "riscv: ERROR: rango solapado"
    assert "rango solapado" in caplog.text
