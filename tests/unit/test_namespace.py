import pytest
from archns.diagnostics import ConfigDefect, UnknownName
from archns.namespace import GlobalNamespace
from archns.numrange import NumericRange
from archns.registrar import ArchitectureRegistrar, ArchSpec, RegisterBank

def _registrar(name, reg_base, op_base, anames=("ADDI", "LUI"), count=4):
    return ArchitectureRegistrar(ArchSpec(
        name=name,
        reg_base=reg_base,
        banks=(RegisterBank("r", count),),
        abi_names=(("sp", "r2"),),
        op_base=op_base,
        anames=tuple(anames),
    ))

def test_example_scenario():
    ns = GlobalNamespace(["NOP", "MOV"])
    _registrar("toy", 0, 1000).register(ns)
    frozen = ns.freeze()
    assert frozen.lookup_instruction_by_name("toy", "ADDI") == 1000
    assert frozen.lookup_instruction_by_name("toy", "MOV") == 1
    assert frozen.format_opcode(1000) == "ADDI"
    assert frozen.format_opcode(1) == "MOV"
    assert frozen.format_register(999999) == "R???999999"

def test_dispatch_to_owner():
    ns = GlobalNamespace(["NOP", "MOV"])
    _registrar("a", 100, 1000).register(ns)
    _registrar("b", 200, 2000, anames=("JAL",)).register(ns)
    frozen = ns.freeze()
    assert frozen.format_register(102) == "r2"
    assert frozen.format_register(203) == "r3"
    assert frozen.register_owner(203) == "b"
    assert frozen.register_owner(104) is None
    assert frozen.format_register(104) == "R???104"
    assert frozen.format_opcode(2000) == "JAL"
    assert frozen.format_opcode(1) == "MOV"
    assert frozen.opcode_owner(1) == "generic"
    assert frozen.format_opcode(1500) == "A???1500"
    assert frozen.architectures() == ["a", "b"]
    assert frozen.lookup_register_by_name("b", "sp") == 202

def test_register_ranges_must_be_disjoint():
    ns = GlobalNamespace(["NOP"])
    _registrar("a", 100, 1000).register(ns)
    with pytest.raises(ConfigDefect) as ei:
        _registrar("b", 103, 2000).register(ns)
    msg = str(ei.value)
    assert "solapa" in msg and "'a'" in msg and msg.startswith("b:")

def test_opcode_ranges_must_be_disjoint():
    ns = GlobalNamespace(["NOP"])
    _registrar("a", 100, 1000).register(ns)
    with pytest.raises(ConfigDefect):
        _registrar("b", 200, 1001).register(ns)

def test_categories_are_independent():
    ns = GlobalNamespace(["NOP"])
    ns.register_register_range(NumericRange(1000, 10), lambda i: "x", owner="a")
    ns.register_opcode_range(NumericRange(1000, 10), lambda i: "y", owner="a")
    frozen = ns.freeze()
    assert frozen.format_register(1005) == "x"
    assert frozen.format_opcode(1005) == "y"

def test_opcode_range_cannot_take_generic_ids():
    ns = GlobalNamespace(["NOP", "MOV"])
    with pytest.raises(ConfigDefect):
        ns.register_opcode_range(NumericRange(1, 5), lambda i: "z", owner="bad")

def test_same_architecture_name_twice():
    ns = GlobalNamespace(["NOP"])
    _registrar("a", 100, 1000).register(ns)
    with pytest.raises(ConfigDefect):
        ns.attach(_registrar("a", 300, 3000).build(["NOP"]))

def test_frozen_namespace_rejects_writes():
    ns = GlobalNamespace(["NOP"])
    frozen = ns.freeze()
    assert ns.freeze() is frozen
    with pytest.raises(ConfigDefect) as ei:
        _registrar("late", 100, 1000).register(ns)
    assert "congelado" in str(ei.value)

def test_unknown_architecture_and_names():
    ns = GlobalNamespace(["NOP"])
    _registrar("a", 100, 1000).register(ns)
    frozen = ns.freeze()
    with pytest.raises(UnknownName):
        frozen.architecture("z80")
    with pytest.raises(UnknownName):
        frozen.lookup_register_by_name("a", "r9")
    with pytest.raises(UnknownName):
        frozen.lookup_instruction_by_name("a", "totally-invalid-token")

def test_empty_namespace_formats_placeholders():
    frozen = GlobalNamespace([]).freeze()
    assert frozen.format_register(0) == "R???0"
    assert frozen.format_opcode(0) == "A???0"
    assert frozen.architectures() == []

def test_failed_registration_leaves_nothing_behind():
    ns = GlobalNamespace(["NOP"])
    ns.register_opcode_range(NumericRange(1000, 5), lambda i: "z", owner="other")
    toy = _registrar("toy", 500, 1000)
    with pytest.raises(ConfigDefect) as ei:
        toy.register(ns)
    assert "opcodes" in str(ei.value)
    frozen = ns.freeze()
    assert frozen.register_owner(500) is None
    assert frozen.architectures() == []

def test_registration_can_be_retried_after_conflict_is_gone():
    ns = GlobalNamespace(["NOP"])
    _registrar("a", 100, 1000).register(ns)
    clash = _registrar("b", 200, 1001)
    with pytest.raises(ConfigDefect):
        clash.register(ns)
    # el registro fallido no reservó el rango de registros de 'b'
    _registrar("c", 200, 3000).register(ns)
    assert ns.freeze().register_owner(201) == "c"
